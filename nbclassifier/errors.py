# errors.py - exceptions raised while training and evaluating a classifier
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.


class CorpusUnavailableError(IOError):
    """Raised when the file backing a corpus cannot be read.

    `path` is the location of the corpus that could not be read. Training on
    a partial vocabulary is meaningless, so callers should treat this as
    fatal.

    """

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = 'cannot read corpus {}'.format(path)
        if reason is not None:
            message = '{}: {}'.format(message, reason)
        super().__init__(message)


class DegenerateModelError(ValueError):
    """Raised when a probability model cannot be normalized, because every
    probability of some class would be ``0 / 0``.

    """


class UndefinedMetricError(ArithmeticError):
    """Raised when a confusion-matrix metric is requested but its denominator
    is zero.

    `metric` is the name of the undefined metric.

    """

    def __init__(self, metric, reason):
        self.metric = metric
        self.reason = reason
        super().__init__('{} is undefined: {}'.format(metric, reason))
