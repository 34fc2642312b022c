# trainers.py - objects which learn from corpora
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""
    Trainer is concrete class that observes a Corpus and counts the words of
    each document added to it into a VocabularyAggregator, as real or spam as
    appropriate given the type of trainer.

    RealTrainer and SpamTrainer are convenience subclasses of Trainer, that
    initialize as the appropriate type of Trainer

"""
import logging

from nbclassifier.classifiers.constants import REAL
from nbclassifier.classifiers.constants import SPAM
from nbclassifier.corpora import document_added
from nbclassifier.corpora import label_name


class Trainer(object):
    """Associates a VocabularyAggregator object and one or more Corpora.

    `aggregator` is an instance of
    :class:`~nbclassifier.vocabulary.VocabularyAggregator` into which the
    documents added to the corpora will be counted.

    If `is_real` is ``True`` the documents added to the corpora are counted as
    real, otherwise they are counted as spam.

    `corpora` is an iterable of :class:`Corpus` objects to which this trainer
    will listen. When a document is added to any of these corpora, the
    :meth:`train` method will be called.

    The signal holds only a weak reference to the trainer, so the trainer
    must be kept alive for as long as it should keep learning.

    """

    def __init__(self, aggregator, is_real, corpora):
        self.aggregator = aggregator
        self.is_real = is_real
        self.corpora = list(corpora)
        for corpus in self.corpora:
            document_added.connect(self.train, sender=corpus)

    def train(self, sender, document):
        """Count the words of the specified document.

        `sender` is the :class:`Corpus` object to which the document was
        added.

        `document` is a list of words.

        """
        logging.debug('training %s with %d words', label_name(self.is_real),
                      len(document))
        self.aggregator.ingest(document, self.is_real)

    def disconnect(self):
        """Stop listening to the corpora given to the constructor."""
        for corpus in self.corpora:
            document_added.disconnect(self.train, sender=corpus)


class RealTrainer(Trainer):
    """Trainer that trains on documents that are assumed to be real.

    This is a convenience class for ``Trainer(aggregator, True, corpora)``.

    """

    def __init__(self, aggregator, corpora):
        super().__init__(aggregator, REAL, corpora)


class SpamTrainer(Trainer):
    """Trainer that trains on documents that are assumed to be spam.

    This is a convenience class for ``Trainer(aggregator, False, corpora)``.

    """

    def __init__(self, aggregator, corpora):
        super().__init__(aggregator, SPAM, corpora)
