# base.py - classes for a corpus of labeled documents
#
# Copyright (C) 2002-2013 Python Software Foundation; All Rights Reserved
# Copyright 2014 Jeffrey Finkelstein.
#
# This file is part of nbclassifier, which is licensed under the Python
# Software Foundation License; for more information, see LICENSE.txt.
"""A corpus is a collection of documents that share a label, either real or
spam. Each document is one line of text, stored as the list of its words.

Corpora are observable. Whenever a document is added to a corpus, the
:data:`document_added` signal is emitted; trainers and validators connect to
this signal in order to learn from, or classify, each document as soon as it
is read.

"""
import logging

from blinker import signal

from nbclassifier.classifiers.constants import REAL
from nbclassifier.tokenizer import tokenize

#: A signal that is emitted when a document is added to a corpus.
#:
#: Subscribers to this signal receive the corpus object that emitted the
#: signal, along with a ``document`` keyword argument, whose value is the list
#: of words of the document that was added.
document_added = signal('document-added')


def label_name(is_real):
    """Returns ``'real'`` or ``'spam'``, the name of the label `is_real`."""
    return 'real' if is_real == REAL else 'spam'


class Corpus:
    """An ordered collection of documents with a common label.

    When documents are added via the :meth:`add_document` method, the
    :data:`document_added` signal is emitted. To connect a function to this
    signal, use code like the following::

        from nbclassifier.corpora import document_added

        @document_added.connect_via(corpus)
        def on_document_added(corpus, document):
            print('Document {} was added to corpus {}'.format(document,
                                                              corpus))

    `is_real` is the label of every document of the corpus. `lines` is an
    iterable of strings; each is tokenized and added to the corpus when
    :meth:`load` is called, so that receivers connected in the meantime see
    each of them.

    If `store` is ``False``, added documents are only announced through the
    signal and then dropped: the corpus still counts them, so its length is
    the number of documents added, but it cannot be indexed or iterated over
    them.

    """

    def __init__(self, is_real, lines=(), store=True):
        self.is_real = is_real
        self.store = store
        self.documents = []
        self.num_documents = 0
        self._pending = list(lines)

    def add_document(self, document, emit_signal=True):
        """Adds the specified document to this corpus.

        `document` is a list of words. If `emit_signal` is ``True``, the
        :data:`document_added` signal is emitted.

        """
        logging.debug('adding document %d to %s corpus', self.num_documents,
                      label_name(self.is_real))
        self.num_documents += 1
        if self.store:
            self.documents.append(document)
        if emit_signal:
            document_added.send(self, document=document)

    def load(self):
        """Adds the lines given to the constructor as documents."""
        pending, self._pending = self._pending, []
        for line in pending:
            self.add_document(tokenize(line))

    def __getitem__(self, index):
        return self.documents[index]

    def __len__(self):
        return self.num_documents

    def __iter__(self):
        return iter(self.documents)

    def __repr__(self):
        return '<{} corpus of {} documents>'.format(label_name(self.is_real),
                                                    len(self))
