# filesystem.py - a corpus of documents stored in a text file
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
import logging

from nbclassifier.corpora.base import Corpus
from nbclassifier.corpora.base import label_name
from nbclassifier.errors import CorpusUnavailableError
from nbclassifier.tokenizer import tokenize

#: The encoding of corpus files, unless specified otherwise.
DEFAULT_ENCODING = 'utf-8'


class FileCorpus(Corpus):
    """A corpus whose documents are the lines of the text file at `path`.

    The file is not read until :meth:`load` is called. If it cannot be read,
    :exc:`~nbclassifier.errors.CorpusUnavailableError` is raised; documents
    read before the failure remain in the corpus, but the caller should not
    use them, since the corpus is incomplete.

    `store` is as described in :class:`Corpus`.

    """

    def __init__(self, path, is_real, encoding=DEFAULT_ENCODING, store=True):
        super().__init__(is_real, store=store)
        self.path = path
        self.encoding = encoding

    def load(self):
        logging.info('reading %s corpus from %s', label_name(self.is_real),
                     self.path)
        try:
            with open(self.path, encoding=self.encoding) as f:
                for line in f:
                    self.add_document(tokenize(line))
        except (OSError, UnicodeDecodeError) as exception:
            raise CorpusUnavailableError(self.path, exception) from exception
        logging.info('read %d documents from %s', len(self), self.path)

    def __repr__(self):
        return '<{} corpus at {}>'.format(label_name(self.is_real), self.path)
