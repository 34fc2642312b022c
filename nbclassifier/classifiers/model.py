# model.py - smoothed word likelihoods and class priors
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""The probability model of a Naive Bayes classifier.

For each word *w* of the vocabulary *V* (the words seen in either class) the
model stores the pair (P(w|real), P(w|spam)), estimated with additive
(Laplace) smoothing *s*::

                      s + count(w, real)
    P(w|real) = ----------------------------
                 words(real) + s * len(V)

and likewise for spam. A word that never occurred in one class gets just
``s`` in the numerator for that class. The class priors are estimated from the
number of training documents of each class::

                      documents(real) + s
    P(real) = -----------------------------------------
               documents(real) + documents(spam) + 2 * s

and P(spam) is its complement.

The per-word computation has no dependency between words, so the vocabulary
is split into disjoint shards which are computed by a pool of threads. Each
worker fills its own dictionary; the dictionaries are merged only after every
worker has finished, so the result does not depend on the number of shards.

"""
import collections
import concurrent.futures
import logging
import math
import types

from nbclassifier.classifiers.constants import DEFAULT_MAX_WORKERS
from nbclassifier.classifiers.constants import DEFAULT_NUM_PARTITIONS
from nbclassifier.errors import DegenerateModelError

#: Negative infinity, the natural logarithm of a zero probability.
NEGATIVE_INFINITY = float('-inf')


def log_probability(p):
    """Returns the natural logarithm of the probability `p`.

    Unlike :func:`math.log`, this returns negative infinity when `p` is zero
    instead of raising :exc:`ValueError`.

    """
    if p == 0:
        return NEGATIVE_INFINITY
    return math.log(p)


_WordInfoBase = collections.namedtuple('WordInfo', 'realcount spamcount')


class WordInfo(_WordInfoBase):
    """Represents the number of occurrences of a word in real and in spam
    documents.

    An instance of this class is created for each distinct word. Instances
    are immutable, so the counts of a built model cannot change.

    .. note::

       This is a tiny object.  Use of ``__slots__`` is essential to conserve
       memory.

    """

    __slots__ = ()

    def __new__(cls, realcount=0, spamcount=0):
        return super().__new__(cls, realcount, spamcount)

    @property
    def unseen(self):
        """Whether this word occurred in neither class."""
        return self.realcount == 0 and self.spamcount == 0


class ProbabilityModel:
    """An immutable table of word likelihoods plus the two class priors.

    `likelihoods` maps each word of the vocabulary to a pair
    ``(P(word|real), P(word|spam))``. `wordinfo` maps the same words to their
    :class:`WordInfo` training counts. `prior_real` and `prior_spam` are the
    class priors. `total_words` is the number of words seen in training across
    both classes.

    Both mappings are exposed as read-only views, so a single instance may be
    shared by any number of threads without locking. If `wordinfo` does not
    cover exactly the words of `likelihoods`, :exc:`ValueError` is raised.

    """

    def __init__(self, likelihoods, wordinfo, prior_real, prior_spam,
                 smoothing, total_words):
        self._likelihoods = types.MappingProxyType(
            {word: tuple(pair) for word, pair in likelihoods.items()})
        self._wordinfo = types.MappingProxyType(dict(wordinfo))
        if self._likelihoods.keys() != self._wordinfo.keys():
            raise ValueError('wordinfo must have exactly the words of'
                             ' likelihoods')
        self._prior_real = prior_real
        self._prior_spam = prior_spam
        self._smoothing = smoothing
        self._total_words = total_words

    @property
    def likelihoods(self):
        return self._likelihoods

    @property
    def wordinfo(self):
        return self._wordinfo

    @property
    def prior_real(self):
        return self._prior_real

    @property
    def prior_spam(self):
        return self._prior_spam

    @property
    def smoothing(self):
        return self._smoothing

    @property
    def total_words(self):
        return self._total_words

    @property
    def vocabulary_size(self):
        return len(self._likelihoods)

    def unseen_word_logprob(self):
        """Returns ``ln(1 / total_words)``, the log-probability assigned to a
        word that is in the model but occurred in neither class.

        If no words were seen at all, this is negative infinity.

        """
        if self._total_words == 0:
            return NEGATIVE_INFINITY
        return -math.log(self._total_words)

    def __contains__(self, word):
        return word in self._likelihoods

    def __getitem__(self, word):
        return self._likelihoods[word]

    def __len__(self):
        return len(self._likelihoods)

    def __iter__(self):
        return iter(self._likelihoods)

    def get(self, word, default=None):
        return self._likelihoods.get(word, default)

    def __repr__(self):
        return ('ProbabilityModel(words={}, prior_real={!r}, prior_spam={!r},'
                ' smoothing={!r})').format(len(self), self._prior_real,
                                           self._prior_spam, self._smoothing)


def class_priors(real_documents, spam_documents, smoothing):
    """Returns the pair ``(P(real), P(spam))`` for the given numbers of
    training documents in each class.

    If there are no documents and `smoothing` is zero, the priors are
    undefined and :exc:`DegenerateModelError` is raised.

    """
    denominator = real_documents + spam_documents + 2 * smoothing
    if denominator == 0:
        raise DegenerateModelError('no training documents and no smoothing;'
                                   ' class priors are undefined')
    prior_real = (real_documents + smoothing) / denominator
    return prior_real, 1 - prior_real


def partition(words, num_partitions):
    """Deals `words` round-robin into a list of `num_partitions` disjoint
    lists.

    """
    shards = [[] for _ in range(num_partitions)]
    for i, word in enumerate(words):
        shards[i % num_partitions].append(word)
    return shards


def _compute_shard(shard, real_table, spam_table, real_denominator,
                   spam_denominator, smoothing):
    """Returns a dictionary mapping each word of `shard` to its pair of
    likelihoods.

    """
    result = {}
    for word in shard:
        realcount = real_table.get(word, 0)
        spamcount = spam_table.get(word, 0)
        result[word] = ((smoothing + realcount) / real_denominator,
                        (smoothing + spamcount) / spam_denominator)
    logging.debug('computed likelihoods for a shard of %d words', len(shard))
    return result


def word_likelihoods(real_table, spam_table, real_total_words,
                     spam_total_words, smoothing,
                     num_partitions=DEFAULT_NUM_PARTITIONS,
                     max_workers=DEFAULT_MAX_WORKERS):
    """Returns a dictionary mapping each word seen in either `real_table` or
    `spam_table` to the pair ``(P(word|real), P(word|spam))``.

    `real_table` and `spam_table` map words to their number of occurrences in
    each class. `real_total_words` and `spam_total_words` are the total number
    of words seen in each class, and `smoothing` is the additive constant.

    The vocabulary is split into `num_partitions` shards, computed by a pool
    of at most `max_workers` threads.

    """
    if smoothing < 0:
        raise ValueError('smoothing must be non-negative, not'
                         ' {}'.format(smoothing))
    if num_partitions < 1:
        raise ValueError('num_partitions must be positive, not'
                         ' {}'.format(num_partitions))
    if max_workers < 1:
        raise ValueError('max_workers must be positive, not'
                         ' {}'.format(max_workers))
    vocabulary = set(real_table) | set(spam_table)
    if not vocabulary:
        return {}
    real_denominator = real_total_words + smoothing * len(vocabulary)
    spam_denominator = spam_total_words + smoothing * len(vocabulary)
    if real_denominator == 0 or spam_denominator == 0:
        raise DegenerateModelError('a class has no training words and there'
                                   ' is no smoothing; its likelihoods are'
                                   ' undefined')
    if smoothing == 0:
        logging.warning('smoothing is zero; words missing from one class get'
                        ' probability zero for that class')
    shards = partition(vocabulary, num_partitions)
    likelihoods = {}
    with concurrent.futures.ThreadPoolExecutor(max_workers) as executor:
        futures = [executor.submit(_compute_shard, shard, real_table,
                                   spam_table, real_denominator,
                                   spam_denominator, smoothing)
                   for shard in shards]
        for future in concurrent.futures.as_completed(futures):
            likelihoods.update(future.result())
    return likelihoods


def build(real_table, spam_table, real_total_words, spam_total_words,
          smoothing, real_documents=0, spam_documents=0,
          num_partitions=DEFAULT_NUM_PARTITIONS,
          max_workers=DEFAULT_MAX_WORKERS):
    """Returns a new :class:`ProbabilityModel`.

    The first five arguments are as described in :func:`word_likelihoods`.
    `real_documents` and `spam_documents` are the number of training
    documents in each class, used to estimate the class priors.

    """
    likelihoods = word_likelihoods(real_table, spam_table, real_total_words,
                                   spam_total_words, smoothing,
                                   num_partitions=num_partitions,
                                   max_workers=max_workers)
    prior_real, prior_spam = class_priors(real_documents, spam_documents,
                                          smoothing)
    wordinfo = {word: WordInfo(real_table.get(word, 0),
                               spam_table.get(word, 0))
                for word in likelihoods}
    logging.info('built model of %d words; P(real) = %f, P(spam) = %f',
                 len(likelihoods), prior_real, prior_spam)
    return ProbabilityModel(likelihoods, wordinfo, prior_real, prior_spam,
                            smoothing, real_total_words + spam_total_words)
