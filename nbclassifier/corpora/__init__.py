# __init__.py - indicates that this directory is a Python package
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
from .base import Corpus
from .base import document_added
from .base import label_name
from .filesystem import FileCorpus
