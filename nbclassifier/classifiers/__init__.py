# __init__.py - indicates that this directory is a Python package
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
from .basic import Classifier
from .basic import Decision
from .basic import classify
from .model import ProbabilityModel
from .model import WordInfo
from .model import build
