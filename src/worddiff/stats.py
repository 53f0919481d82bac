# -*- coding: utf-8 -*-
"""
Word counts over an operation sequence.
"""
from collections import namedtuple

from .ops import EQUAL, INSERT, DELETE
from .tokenizer import tokenize


class DiffStats(namedtuple('DiffStats', 'inserted deleted unchanged')):
    """Number of words inserted, deleted and kept."""

    __slots__ = ()

    @property
    def changed(self):
        return self.inserted + self.deleted


def _word_count(text):
    return sum(1 for token in tokenize(text) if token.is_word)


def diff_stats(ops):
    """
    Count the words each kind of operation carries.

    Whitespace is not counted.

    >>> from worddiff.ops import DiffOp
    >>> diff_stats([DiffOp(EQUAL, u'a '), DiffOp(DELETE, u'b c'), DiffOp(INSERT, u'd')])
    DiffStats(inserted=1, deleted=2, unchanged=1)
    """
    counts = {EQUAL: 0, INSERT: 0, DELETE: 0}
    for op in ops:
        counts[op.kind] += _word_count(op.text)
    return DiffStats(counts[INSERT], counts[DELETE], counts[EQUAL])
