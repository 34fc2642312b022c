# test_safereport.py - unit tests for the nbclassifier.safereport module
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import os
import shutil
import tempfile
import unittest
from unittest import mock

from lockfile import LockError

from nbclassifier.evaluation import ConfusionCounters
from nbclassifier.evaluation import Summary
from nbclassifier.safereport import report_read
from nbclassifier.safereport import report_write
from nbclassifier.safereport import summary_as_dict


class SafeReportTest(unittest.TestCase):

    def setUp(self):
        self.directory = tempfile.mkdtemp()
        self.filename = os.path.join(self.directory, 'report.json')
        self.summary = Summary(specificity=None, sensitivity=0.75,
                               accuracy=0.75,
                               counters=ConfusionCounters(3, 0, 0, 1),
                               undefined=('specificity',))

    def tearDown(self):
        shutil.rmtree(self.directory)

    def test_summary_as_dict(self):
        result = summary_as_dict(self.summary, smoothing=1)
        self.assertIsNone(result['specificity'])
        self.assertEqual(result['undefined'], ['specificity'])
        self.assertEqual(result['counters']['true_positive'], 3)
        self.assertEqual(result['smoothing'], 1)
        self.assertNotIn('smoothing', summary_as_dict(self.summary))

    def test_write_and_read(self):
        report_write(self.filename, summary_as_dict(self.summary))
        result = report_read(self.filename)
        self.assertEqual(result, summary_as_dict(self.summary))
        self.assertFalse(os.path.exists(self.filename + '.lock'))

    def test_overwrite(self):
        report_write(self.filename, {'accuracy': 0.5})
        report_write(self.filename, {'accuracy': 1.0})
        self.assertEqual(report_read(self.filename), {'accuracy': 1.0})

    def test_temporary_file_in_target_directory(self):
        directory = os.path.join(self.directory, 'reports')
        os.mkdir(directory)
        filename = os.path.join(directory, 'report.json')
        with mock.patch('nbclassifier.safereport.NamedTemporaryFile',
                        wraps=tempfile.NamedTemporaryFile) as temporary:
            report_write(filename, {'accuracy': 1.0})
        self.assertEqual(temporary.call_args[1]['dir'], directory)
        self.assertEqual(os.listdir(directory), ['report.json'])

    def test_missing_directory(self):
        filename = os.path.join(self.directory, 'missing', 'report.json')
        self.assertRaises((LockError, OSError), report_write, filename,
                          {'accuracy': 1.0})
