# vocabulary.py - word frequency tables built from labeled documents
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Counting the words of the real and spam training corpora.

A :class:`VocabularyAggregator` owns one frequency table per class, a
combined table over both classes, and a :class:`ClassStatistics` record per
class. Several producers (typically one per training corpus) may call
:meth:`VocabularyAggregator.ingest` at the same time; every mutation happens
while holding a single lock.

Once training is complete, :meth:`VocabularyAggregator.build_model` turns the
tables into an immutable
:class:`~nbclassifier.classifiers.model.ProbabilityModel`.

"""
import collections
import logging
import threading

from nbclassifier.classifiers.constants import DEFAULT_MAX_WORKERS
from nbclassifier.classifiers.constants import DEFAULT_NUM_PARTITIONS
from nbclassifier.classifiers.model import build


class ClassStatistics:
    """The total number of words and documents seen for one class."""

    __slots__ = 'words', 'documents'

    def __init__(self, words=0, documents=0):
        self.words = words
        self.documents = documents

    def __repr__(self):
        return 'ClassStatistics(words={!r}, documents={!r})'.format(
            self.words, self.documents)

    def __eq__(self, other):
        if not isinstance(other, ClassStatistics):
            return NotImplemented
        return (self.words, self.documents) == (other.words, other.documents)


class VocabularyAggregator:
    """Accumulates word counts for the real and the spam class.

    The attributes :attr:`real`, :attr:`spam` and :attr:`combined` are
    :class:`collections.Counter` objects mapping each word to the number of
    times it has been seen in real documents, spam documents, and either,
    respectively. They should be treated as read-only by everything except
    this class.

    """

    def __init__(self):
        self.real = collections.Counter()
        self.spam = collections.Counter()
        self.combined = collections.Counter()
        self.real_stats = ClassStatistics()
        self.spam_stats = ClassStatistics()
        self._lock = threading.Lock()

    def table(self, is_real):
        """Returns the frequency table for the real class if `is_real` is
        ``True``, or for the spam class otherwise.

        """
        return self.real if is_real else self.spam

    def stats(self, is_real):
        """Returns the :class:`ClassStatistics` of the real class if `is_real`
        is ``True``, or of the spam class otherwise.

        """
        return self.real_stats if is_real else self.spam_stats

    def ingest(self, wordstream, is_real):
        """Counts the words of a single document.

        `wordstream` is an iterable of strings, the tokens of one document (one
        line of a corpus). Tokens are counted exactly as given; nothing is
        lowercased, stripped or rejected. If `is_real` is ``True`` the words
        are counted for the real class, otherwise for the spam class. In both
        cases the combined table is updated as well, and the document count of
        the class is incremented once.

        This method may be called from several threads at once.

        """
        words = list(wordstream)
        table = self.table(is_real)
        stats = self.stats(is_real)
        with self._lock:
            table.update(words)
            self.combined.update(words)
            stats.words += len(words)
            stats.documents += 1

    @property
    def vocabulary_size(self):
        """The number of distinct words seen in either class."""
        return len(self.combined)

    @property
    def total_words(self):
        """The number of words seen in both classes together."""
        return self.real_stats.words + self.spam_stats.words

    def build_model(self, smoothing, num_partitions=DEFAULT_NUM_PARTITIONS,
                    max_workers=DEFAULT_MAX_WORKERS):
        """Returns the probability model for the words counted so far.

        `smoothing` is the additive constant applied to every count. The
        per-word computation is split into `num_partitions` shards processed
        by at most `max_workers` threads.

        """
        logging.info('building model from %d words (%d real, %d spam)',
                     self.vocabulary_size, self.real_stats.words,
                     self.spam_stats.words)
        return build(self.real, self.spam, self.real_stats.words,
                     self.spam_stats.words, smoothing,
                     real_documents=self.real_stats.documents,
                     spam_documents=self.spam_stats.documents,
                     num_partitions=num_partitions, max_workers=max_workers)

    def __repr__(self):
        return 'VocabularyAggregator(real={!r}, spam={!r})'.format(
            self.real_stats, self.spam_stats)
