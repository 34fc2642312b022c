# validators.py - objects which classify held-out corpora
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import logging
import threading

from blinker import signal

from nbclassifier.corpora import document_added
from nbclassifier.corpora import label_name

#: A signal that is emitted after a validation document has been classified.
#:
#: Subscribers receive the corpus containing the document, along with a
#: ``document`` keyword argument (the list of words) and a ``decision``
#: keyword argument (the :class:`~nbclassifier.classifiers.Decision`).
document_classified = signal('document-classified')


class Validator(object):
    """Classifies each document added to one or more corpora and records the
    decision against the known label of the corpora.

    `classifier` is an instance of
    :class:`~nbclassifier.classifiers.Classifier`
    and `evaluator` an instance of
    :class:`~nbclassifier.evaluation.EvaluationAggregator`. `is_real` is the
    ground-truth label of every document of `corpora`.

    Like :class:`~nbclassifier.trainers.Trainer`, a validator must be kept
    alive for as long as it should keep listening.

    """

    def __init__(self, classifier, evaluator, is_real, corpora):
        self.classifier = classifier
        self.evaluator = evaluator
        self.is_real = is_real
        self.corpora = list(corpora)
        #: The number of documents whose score for some class was negative
        #: infinity.
        self.underflows = 0
        self._lock = threading.Lock()
        for corpus in self.corpora:
            document_added.connect(self.validate, sender=corpus)

    def validate(self, sender, document):
        """Classify the specified document and record the decision.

        `sender` is the :class:`Corpus` object to which the document was
        added, and `document` is a list of words.

        """
        decision = self.classifier.classify(document)
        logging.debug('%s document classified as %s', label_name(self.is_real),
                      label_name(decision.is_real))
        self.evaluator.record(decision.is_real, self.is_real)
        if decision.underflowed:
            with self._lock:
                self.underflows += 1
        document_classified.send(sender, document=document, decision=decision)

    def disconnect(self):
        """Stop listening to the corpora given to the constructor."""
        for corpus in self.corpora:
            document_added.disconnect(self.validate, sender=corpus)
