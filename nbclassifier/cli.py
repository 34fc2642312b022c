# cli.py - command line interface for training and evaluating a classifier
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Usage: nbclassifier REAL_TRAIN SPAM_TRAIN REAL_VALID SPAM_VALID SMOOTHING

Trains a Naive Bayes classifier on the real and spam training files, then
classifies each line of the real and spam validation files and prints the
specificity, sensitivity and accuracy of the classifier.

"""
import argparse
import logging
import sys

from lockfile import LockError

from nbclassifier.classifiers.constants import DEFAULT_MAX_WORKERS
from nbclassifier.classifiers.constants import DEFAULT_NUM_PARTITIONS
from nbclassifier.errors import CorpusUnavailableError
from nbclassifier.errors import DegenerateModelError
from nbclassifier.runner import run
from nbclassifier.safereport import report_write
from nbclassifier.safereport import summary_as_dict

#: The format of log messages written to standard error.
LOG_FORMAT = '%(levelname)s: %(message)s'


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError('{} is negative'.format(value))
    return number


def positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError('{} is not positive'.format(value))
    return number


def make_parser():
    parser = argparse.ArgumentParser(
        prog='nbclassifier',
        description='Train and evaluate a Naive Bayes real/spam classifier.')
    parser.add_argument('real_training', help='real training corpus')
    parser.add_argument('spam_training', help='spam training corpus')
    parser.add_argument('real_validation', help='real validation corpus')
    parser.add_argument('spam_validation', help='spam validation corpus')
    parser.add_argument('smoothing', type=non_negative_int,
                        help='additive (Laplace) smoothing constant')
    parser.add_argument('--partitions', type=positive_int,
                        default=DEFAULT_NUM_PARTITIONS,
                        help='vocabulary shards (default: %(default)s)')
    parser.add_argument('--workers', type=positive_int,
                        default=DEFAULT_MAX_WORKERS,
                        help='worker threads per phase (default: %(default)s)')
    parser.add_argument('--report', metavar='PATH',
                        help='also write the results as JSON to PATH')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='count', default=0,
                           help='log more; repeat for debug messages')
    verbosity.add_argument('-q', '--quiet', action='store_true',
                           help='log errors only')
    return parser


def format_metric(value):
    return 'undefined' if value is None else '{:f}'.format(value)


def format_summary(summary):
    """Returns the one-line report of `summary`."""
    return 'specificity: {}, sensitivity: {}, accuracy: {}'.format(
        format_metric(summary.specificity), format_metric(summary.sensitivity),
        format_metric(summary.accuracy))


def main(argv=None):
    args = make_parser().parse_args(argv)
    if args.quiet:
        level = logging.ERROR
    elif args.verbose > 1:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    try:
        summary = run(args.real_training, args.spam_training,
                      args.real_validation, args.spam_validation,
                      smoothing=args.smoothing,
                      num_partitions=args.partitions,
                      max_workers=args.workers)
    except (CorpusUnavailableError, DegenerateModelError) as exception:
        logging.error('%s', exception)
        return 1
    print(format_summary(summary))
    if args.report is not None:
        try:
            report_write(args.report, summary_as_dict(summary, args.smoothing))
        except (LockError, OSError) as exception:
            logging.error('cannot write report to %s: %s', args.report,
                          exception)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
