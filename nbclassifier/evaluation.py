# evaluation.py - confusion matrix of classifier decisions
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Tallying decisions against known labels.

The real class is the positive class: a real document classified as real is a
true positive, and a spam document classified as real is a false positive.

A metric whose denominator is zero (for example, the specificity when no spam
document was validated) is undefined. Requesting it directly raises
:exc:`~nbclassifier.errors.UndefinedMetricError`; :meth:`summarize` reports it
as ``None`` and lists its name in :attr:`Summary.undefined`.

"""
import collections
import logging
import threading

from nbclassifier.errors import UndefinedMetricError

#: The names of the metrics computed by :meth:`EvaluationAggregator.summarize`.
METRICS = ('specificity', 'sensitivity', 'accuracy')


class ConfusionCounters:
    """The four counters of a two-by-two confusion matrix."""

    __slots__ = ('true_positive', 'false_positive', 'true_negative',
                 'false_negative')

    def __init__(self, true_positive=0, false_positive=0, true_negative=0,
                 false_negative=0):
        self.true_positive = true_positive
        self.false_positive = false_positive
        self.true_negative = true_negative
        self.false_negative = false_negative

    @property
    def total(self):
        return (self.true_positive + self.false_positive + self.true_negative
                + self.false_negative)

    def as_dict(self):
        return {name: getattr(self, name) for name in self.__slots__}

    def __eq__(self, other):
        if not isinstance(other, ConfusionCounters):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return 'ConfusionCounters({})'.format(
            ', '.join('{}={}'.format(k, v) for k, v in self.as_dict().items()))


#: The metrics derived from a :class:`ConfusionCounters`. Each metric is a
#: float, or ``None`` if it is undefined; `undefined` is a tuple of the names
#: of the undefined metrics.
Summary = collections.namedtuple('Summary', 'specificity sensitivity accuracy'
                                            ' counters undefined')


def _ratio(metric, numerator, denominator, reason):
    if denominator == 0:
        raise UndefinedMetricError(metric, reason)
    return numerator / denominator


class EvaluationAggregator:
    """Accumulates decisions into a confusion matrix.

    :meth:`record` may be called from several threads at once.

    """

    def __init__(self):
        self.counters = ConfusionCounters()
        self._lock = threading.Lock()

    def record(self, decision, is_real):
        """Records a single decision.

        `decision` is ``True`` if the classifier decided the document is real,
        and `is_real` is ``True`` if the document really is real. Exactly one
        of the four counters is incremented.

        """
        if is_real:
            name = 'true_positive' if decision else 'false_negative'
        else:
            name = 'false_positive' if decision else 'true_negative'
        with self._lock:
            setattr(self.counters, name, getattr(self.counters, name) + 1)

    def specificity(self):
        """Returns the fraction of spam documents classified as spam."""
        c = self.counters
        return _ratio('specificity', c.true_negative,
                      c.true_negative + c.false_positive,
                      'no spam documents were classified')

    def sensitivity(self):
        """Returns the fraction of real documents classified as real."""
        c = self.counters
        return _ratio('sensitivity', c.true_positive,
                      c.true_positive + c.false_negative,
                      'no real documents were classified')

    def accuracy(self):
        """Returns the fraction of documents classified correctly."""
        c = self.counters
        return _ratio('accuracy', c.true_positive + c.true_negative, c.total,
                      'no documents were classified')

    def false_positive_rate(self):
        """Returns the fraction of spam documents classified as real."""
        c = self.counters
        return _ratio('false positive rate', c.false_positive,
                      c.true_negative + c.false_positive,
                      'no spam documents were classified')

    def false_negative_rate(self):
        """Returns the fraction of real documents classified as spam."""
        c = self.counters
        return _ratio('false negative rate', c.false_negative,
                      c.true_positive + c.false_negative,
                      'no real documents were classified')

    def summarize(self):
        """Returns a :data:`Summary` of the decisions recorded so far.

        Undefined metrics are logged as warnings and reported as ``None``.

        """
        values = {}
        undefined = []
        for metric in METRICS:
            try:
                values[metric] = getattr(self, metric)()
            except UndefinedMetricError as exception:
                logging.warning('%s', exception)
                values[metric] = None
                undefined.append(metric)
        counters = ConfusionCounters(**self.counters.as_dict())
        return Summary(counters=counters, undefined=tuple(undefined),
                       **values)
