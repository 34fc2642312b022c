# basic.py - a log-likelihood Naive Bayes classifier for documents
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Deciding whether a document is real or spam.

The score of each class starts at the logarithm of the class prior, and the
logarithm of the likelihood of each word of the document is added to it. Sums
of logarithms are used instead of products of probabilities so that long
documents do not underflow to zero. The document is real if and only if the
real score is strictly greater than the spam score; ties are spam.

Words that are not in the model's vocabulary are skipped entirely, so they
neither help nor hurt either class.

"""
import collections
import logging
import math

from nbclassifier.classifiers.constants import REAL
from nbclassifier.classifiers.constants import SPAM
from nbclassifier.classifiers.model import log_probability


_DecisionBase = collections.namedtuple('Decision', 'is_real log_real log_spam')


class Decision(_DecisionBase):
    """The outcome of classifying a single document.

    `is_real` is the decision, and `log_real` and `log_spam` are the
    accumulated log-scores of the two classes. Either score may be negative
    infinity if the document contains a word with zero probability for that
    class.

    """

    __slots__ = ()

    @property
    def underflowed(self):
        """Whether either score is infinite."""
        return math.isinf(self.log_real) or math.isinf(self.log_spam)


def classify(wordstream, model):
    """Returns the :class:`Decision` for the document `wordstream` under the
    probability model `model`.

    `wordstream` is an iterable of strings. `model` is an instance of
    :class:`~nbclassifier.classifiers.model.ProbabilityModel`.

    """
    log_real = log_probability(model.prior_real)
    log_spam = log_probability(model.prior_spam)
    not_in = model.unseen_word_logprob()
    for word in wordstream:
        likelihoods = model.get(word)
        if likelihoods is None:
            continue
        if model.wordinfo[word].unseen:
            # Unreachable for a model built from counts, since every word of
            # the vocabulary occurred in at least one class.
            log_real += not_in
            log_spam += not_in
        else:
            p_real, p_spam = likelihoods
            log_real += log_probability(p_real)
            log_spam += log_probability(p_spam)
    is_real = REAL if log_real > log_spam else SPAM
    return Decision(is_real, log_real, log_spam)


class Classifier:
    """Classifies documents with a fixed probability model.

    `model` is an instance of
    :class:`~nbclassifier.classifiers.model.ProbabilityModel`. Since the model
    is immutable, a single classifier may be used from several threads at
    once.

    """

    def __init__(self, model):
        self.model = model

    def classify(self, wordstream):
        """Returns the :class:`Decision` for the document `wordstream`."""
        decision = classify(wordstream, self.model)
        if decision.underflowed:
            logging.debug('zero probability in document; scores are %f and'
                          ' %f', decision.log_real, decision.log_spam)
        return decision

    def is_real(self, wordstream):
        """Convenience method for ``self.classify(wordstream).is_real``."""
        return self.classify(wordstream).is_real

    def is_spam(self, wordstream):
        """Convenience method for ``not self.is_real(wordstream)``."""
        return not self.is_real(wordstream)
