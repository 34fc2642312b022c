# __init__.py - indicates that this directory is a Python package
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
from .classifiers import Classifier
from .classifiers import Decision
from .classifiers import ProbabilityModel
from .classifiers import classify
from .evaluation import ConfusionCounters
from .evaluation import EvaluationAggregator
from .evaluation import Summary
from .runner import run
from .vocabulary import VocabularyAggregator
