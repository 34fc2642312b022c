# __main__.py - allows running the package with ``python -m nbclassifier``
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import sys

from nbclassifier.cli import main

sys.exit(main())
