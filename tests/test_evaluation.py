# test_evaluation.py - unit tests for the nbclassifier.evaluation module
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import math
import threading
import unittest

from nbclassifier.classifiers.constants import REAL
from nbclassifier.classifiers.constants import SPAM
from nbclassifier.errors import UndefinedMetricError
from nbclassifier.evaluation import ConfusionCounters
from nbclassifier.evaluation import EvaluationAggregator


class EvaluationAggregatorTest(unittest.TestCase):

    def setUp(self):
        self.evaluator = EvaluationAggregator()

    def record(self, decision, is_real, times):
        for _ in range(times):
            self.evaluator.record(decision, is_real)

    def test_record(self):
        self.evaluator.record(REAL, REAL)
        self.assertEqual(self.evaluator.counters,
                         ConfusionCounters(1, 0, 0, 0))
        self.evaluator.record(SPAM, REAL)
        self.assertEqual(self.evaluator.counters,
                         ConfusionCounters(1, 0, 0, 1))
        self.evaluator.record(REAL, SPAM)
        self.assertEqual(self.evaluator.counters,
                         ConfusionCounters(1, 1, 0, 1))
        self.evaluator.record(SPAM, SPAM)
        self.assertEqual(self.evaluator.counters,
                         ConfusionCounters(1, 1, 1, 1))
        self.assertEqual(self.evaluator.counters.total, 4)

    def test_metrics(self):
        self.record(REAL, REAL, 6)
        self.record(SPAM, REAL, 2)
        self.record(REAL, SPAM, 1)
        self.record(SPAM, SPAM, 3)
        self.assertAlmostEqual(self.evaluator.sensitivity(), 6 / 8)
        self.assertAlmostEqual(self.evaluator.specificity(), 3 / 4)
        self.assertAlmostEqual(self.evaluator.accuracy(), 9 / 12)

    def test_complementary_rates(self):
        self.record(REAL, REAL, 5)
        self.record(SPAM, REAL, 3)
        self.record(REAL, SPAM, 4)
        self.record(SPAM, SPAM, 9)
        self.assertTrue(math.isclose(self.evaluator.specificity()
                                     + self.evaluator.false_positive_rate(),
                                     1))
        self.assertTrue(math.isclose(self.evaluator.sensitivity()
                                     + self.evaluator.false_negative_rate(),
                                     1))

    def test_summarize(self):
        self.record(REAL, REAL, 1)
        self.record(SPAM, SPAM, 1)
        summary = self.evaluator.summarize()
        self.assertEqual(summary.specificity, 1.0)
        self.assertEqual(summary.sensitivity, 1.0)
        self.assertEqual(summary.accuracy, 1.0)
        self.assertEqual(summary.undefined, ())
        self.assertEqual(summary.counters, ConfusionCounters(1, 0, 1, 0))

    def test_summary_counters_are_a_snapshot(self):
        summary = self.evaluator.summarize()
        self.evaluator.record(REAL, REAL)
        self.assertEqual(summary.counters.total, 0)

    def test_no_spam_documents(self):
        self.record(REAL, REAL, 3)
        self.record(SPAM, REAL, 1)
        self.assertAlmostEqual(self.evaluator.sensitivity(), 3 / 4)
        with self.assertRaises(UndefinedMetricError) as context:
            self.evaluator.specificity()
        self.assertEqual(context.exception.metric, 'specificity')
        summary = self.evaluator.summarize()
        self.assertIsNone(summary.specificity)
        self.assertAlmostEqual(summary.sensitivity, 3 / 4)
        self.assertAlmostEqual(summary.accuracy, 3 / 4)
        self.assertEqual(summary.undefined, ('specificity',))

    def test_no_documents(self):
        summary = self.evaluator.summarize()
        self.assertEqual(summary.undefined,
                         ('specificity', 'sensitivity', 'accuracy'))
        self.assertIsNone(summary.accuracy)
        self.assertRaises(UndefinedMetricError, self.evaluator.accuracy)
        self.assertRaises(UndefinedMetricError,
                          self.evaluator.false_negative_rate)


def test_concurrent_record():
    evaluator = EvaluationAggregator()
    outcomes = [(REAL, REAL), (SPAM, REAL), (REAL, SPAM), (SPAM, SPAM)]

    def classify_many(decision, is_real):
        for _ in range(500):
            evaluator.record(decision, is_real)

    threads = [threading.Thread(target=classify_many, args=outcome)
               for outcome in outcomes * 2]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert evaluator.counters == ConfusionCounters(1000, 1000, 1000, 1000)


def test_counters_as_dict():
    counters = ConfusionCounters(true_positive=1, false_negative=2)
    assert counters.as_dict() == {'true_positive': 1, 'false_positive': 0,
                                  'true_negative': 0, 'false_negative': 2}
