# safereport.py - JSON report functions with concurrency locks
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import json
import os
import shutil

from lockfile import FileLock
from tempfile import NamedTemporaryFile


#: The number of seconds for which to acquire a file lock. An exception is
#: raised if the file is still locked after this number of seconds.
DEFAULT_TIMEOUT = 20


def report_read(filename):
    """Read JSON report contents with a lock."""
    with FileLock(filename, timeout=DEFAULT_TIMEOUT):
        with open(filename) as f:
            return json.load(f)


def report_write(filename, value):
    """Store value as JSON without creating corruption.

    Raises :exc:`lockfile.LockError` if the lock cannot be acquired, or
    :exc:`OSError` if the file cannot be written.

    """
    with FileLock(filename, timeout=DEFAULT_TIMEOUT):
        # Dump the data to a temporary file in the same directory first, so
        # that moving it over the requested filename is a rename.
        directory = os.path.dirname(os.path.abspath(filename))
        with NamedTemporaryFile('w', dir=directory, delete=False) as fp:
            json.dump(value, fp, indent=2, sort_keys=True)
        shutil.move(fp.name, filename)


def summary_as_dict(summary, smoothing=None):
    """Returns a JSON-serializable dictionary describing `summary`, an
    instance of :data:`~nbclassifier.evaluation.Summary`.

    Undefined metrics are stored as ``null``.

    """
    result = {
        'specificity': summary.specificity,
        'sensitivity': summary.sensitivity,
        'accuracy': summary.accuracy,
        'undefined': list(summary.undefined),
        'counters': summary.counters.as_dict(),
    }
    if smoothing is not None:
        result['smoothing'] = smoothing
    return result
