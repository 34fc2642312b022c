# test_classifiers.py - unit tests for the nbclassifier.classifiers package
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import collections
import math

from nbclassifier import Classifier
from nbclassifier import classify
from nbclassifier.classifiers.constants import REAL
from nbclassifier.classifiers.constants import SPAM
from nbclassifier.classifiers.model import build
from nbclassifier.classifiers.model import ProbabilityModel
from nbclassifier.classifiers.model import WordInfo

REAL_TABLE = collections.Counter('buy now meeting today'.split())
SPAM_TABLE = collections.Counter('buy cheap now buy buy now'.split())


def make_model(smoothing=1, real_documents=2, spam_documents=2):
    return build(REAL_TABLE, SPAM_TABLE, 4, 6, smoothing,
                 real_documents=real_documents, spam_documents=spam_documents)


def test_classifier():
    classifier = Classifier(make_model())
    assert classifier.is_real(['meeting', 'today'])
    assert classifier.is_spam(['buy', 'cheap'])


def test_scores():
    decision = classify(['buy', 'cheap'], make_model())
    assert decision.is_real == SPAM
    assert math.isclose(decision.log_real,
                        math.log(0.5) + math.log(2 / 9) + math.log(1 / 9))
    assert math.isclose(decision.log_spam,
                        math.log(0.5) + math.log(4 / 11) + math.log(2 / 11))
    assert not decision.underflowed


def test_unknown_words_are_skipped():
    model = make_model(real_documents=3, spam_documents=1)
    decision = classify(['zebra', 'giraffe'], model)
    assert decision.log_real == math.log(model.prior_real)
    assert decision.log_spam == math.log(model.prior_spam)
    assert decision.is_real == REAL
    with_unknown = classify(['cheap', 'zebra'], model)
    without_unknown = classify(['cheap'], model)
    assert with_unknown == without_unknown


def test_ties_are_spam():
    # Equal priors and no known words give equal scores.
    decision = classify(['zebra'], make_model())
    assert decision.log_real == decision.log_spam
    assert decision.is_real == SPAM
    assert classify([], make_model()).is_real == SPAM


def test_word_seen_in_neither_class():
    model = ProbabilityModel({'ghost': (0.5, 0.5)}, {'ghost': WordInfo(0, 0)},
                             0.25, 0.75, 1, 8)
    decision = classify(['ghost'], model)
    assert math.isclose(decision.log_real, math.log(0.25) + math.log(1 / 8))
    assert math.isclose(decision.log_spam, math.log(0.75) + math.log(1 / 8))
    assert decision.is_real == SPAM


def test_zero_smoothing_underflow():
    classifier = Classifier(make_model(smoothing=0))
    decision = classifier.classify(['cheap'])
    assert decision.log_real == float('-inf')
    assert decision.is_real == SPAM
    assert decision.underflowed
    decision = classifier.classify(['meeting', 'buy', 'buy'])
    assert decision.log_spam == float('-inf')
    assert decision.is_real == REAL
    # Both classes zeroed out; a tie, hence spam.
    decision = classifier.classify(['meeting', 'cheap'])
    assert decision.log_real == decision.log_spam == float('-inf')
    assert decision.is_real == SPAM


def test_idempotence():
    classifier = Classifier(make_model())
    document = 'buy now meeting cheap today now'.split()
    first = classifier.classify(document)
    for _ in range(10):
        assert classifier.classify(document) == first


def test_accepts_any_iterable():
    classifier = Classifier(make_model())
    assert (classifier.classify(iter(['meeting', 'today']))
            == classifier.classify(['meeting', 'today']))
