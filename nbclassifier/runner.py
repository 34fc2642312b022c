# runner.py - trains and evaluates a classifier from four corpora
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Running the whole pipeline.

Training reads the real and the spam training corpora concurrently, each in
its own worker thread, counting words into a shared
:class:`~nbclassifier.vocabulary.VocabularyAggregator`. The probability model
is then built in parallel over shards of the vocabulary. Finally, the real and
the spam validation corpora are read and classified concurrently, and the
decisions are tallied in an
:class:`~nbclassifier.evaluation.EvaluationAggregator`.

Any :exc:`~nbclassifier.errors.CorpusUnavailableError` raised while reading a
corpus is propagated to the caller once both tasks of the phase have finished.

"""
import concurrent.futures
import logging

from nbclassifier.classifiers import Classifier
from nbclassifier.classifiers.constants import DEFAULT_MAX_WORKERS
from nbclassifier.classifiers.constants import DEFAULT_NUM_PARTITIONS
from nbclassifier.classifiers.constants import DEFAULT_SMOOTHING
from nbclassifier.classifiers.constants import REAL
from nbclassifier.classifiers.constants import SPAM
from nbclassifier.corpora import FileCorpus
from nbclassifier.evaluation import EvaluationAggregator
from nbclassifier.trainers import RealTrainer
from nbclassifier.trainers import SpamTrainer
from nbclassifier.validators import Validator
from nbclassifier.vocabulary import VocabularyAggregator


def _load_all(corpora, max_workers):
    """Loads each corpus in its own task and waits for all of them."""
    with concurrent.futures.ThreadPoolExecutor(max_workers) as executor:
        futures = [executor.submit(corpus.load) for corpus in corpora]
    # Both tasks have finished here, even if one of them failed.
    for future in futures:
        future.result()


def train(real_corpus, spam_corpus, max_workers=DEFAULT_MAX_WORKERS):
    """Returns a :class:`~nbclassifier.vocabulary.VocabularyAggregator`
    holding the word counts of `real_corpus` and `spam_corpus`.

    Both corpora are loaded concurrently.

    """
    aggregator = VocabularyAggregator()
    trainers = [RealTrainer(aggregator, [real_corpus]),
                SpamTrainer(aggregator, [spam_corpus])]
    try:
        _load_all([real_corpus, spam_corpus], max_workers)
    finally:
        for trainer in trainers:
            trainer.disconnect()
    logging.info('trained on %d real and %d spam documents',
                 aggregator.real_stats.documents,
                 aggregator.spam_stats.documents)
    return aggregator


def validate(model, real_corpus, spam_corpus, max_workers=DEFAULT_MAX_WORKERS):
    """Classifies every document of `real_corpus` and `spam_corpus` with
    `model` and returns the
    :class:`~nbclassifier.evaluation.EvaluationAggregator` holding the
    results.

    Both corpora are loaded concurrently.

    """
    classifier = Classifier(model)
    evaluator = EvaluationAggregator()
    validators = [Validator(classifier, evaluator, REAL, [real_corpus]),
                  Validator(classifier, evaluator, SPAM, [spam_corpus])]
    try:
        _load_all([real_corpus, spam_corpus], max_workers)
    finally:
        for validator in validators:
            validator.disconnect()
    underflows = sum(validator.underflows for validator in validators)
    if underflows:
        logging.warning('%d documents had a zero probability for some class',
                        underflows)
    logging.info('validated %d documents', evaluator.counters.total)
    return evaluator


def run(real_training, spam_training, real_validation, spam_validation,
        smoothing=DEFAULT_SMOOTHING, num_partitions=DEFAULT_NUM_PARTITIONS,
        max_workers=DEFAULT_MAX_WORKERS):
    """Trains a classifier on the first two files, evaluates it on the last
    two, and returns the resulting :data:`~nbclassifier.evaluation.Summary`.

    Each argument is the path to a text file in which each line is one
    document. `smoothing` is the additive smoothing constant, `num_partitions`
    the number of vocabulary shards used when building the model, and
    `max_workers` the size of the worker pool of each parallel phase.

    """
    if smoothing < 0:
        raise ValueError('smoothing must be non-negative, not'
                         ' {}'.format(smoothing))
    aggregator = train(FileCorpus(real_training, REAL, store=False),
                       FileCorpus(spam_training, SPAM, store=False),
                       max_workers=max_workers)
    model = aggregator.build_model(smoothing, num_partitions=num_partitions,
                                   max_workers=max_workers)
    evaluator = validate(model, FileCorpus(real_validation, REAL, store=False),
                         FileCorpus(spam_validation, SPAM, store=False),
                         max_workers=max_workers)
    return evaluator.summarize()
