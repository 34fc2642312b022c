# constants.py - constant variables used in multiple modules
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.

#: Label (and decision) for documents of the "real" class.
REAL = True

#: Label (and decision) for documents of the "spam" class.
SPAM = False

#: The additive (Laplace) constant applied to every raw count before the
#: counts are normalized into probabilities. At 0 the counting estimates are
#: believed completely, so a word seen in only one class gets probability zero
#: in the other, and any document containing it can never be assigned to that
#: other class.
DEFAULT_SMOOTHING = 1

#: The number of disjoint shards into which the vocabulary is split when
#: computing word likelihoods. This only affects how the work is spread over
#: the worker threads; the resulting model is the same for any value.
DEFAULT_NUM_PARTITIONS = 4

#: The maximum number of worker threads used for each parallel phase. Two is
#: enough to process the real and the spam corpus simultaneously.
DEFAULT_MAX_WORKERS = 2
