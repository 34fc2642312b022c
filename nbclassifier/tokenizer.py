# tokenizer.py - splits lines of text into words
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""Module to tokenize lines of text for classification."""


def tokenize(line):
    """Returns the list of whitespace-delimited words in `line`.

    Words are returned verbatim: case and punctuation are preserved.

    """
    return line.split()
