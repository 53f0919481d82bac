# -*- coding: utf-8 -*-
"""
Lossless word/whitespace tokenizer.

Text is cut at every boundary between whitespace and non-whitespace, so
joining the token texts always gives back the input unchanged.
"""
from collections import namedtuple

from .config import _token_re

WORD = 'word'
WHITESPACE = 'whitespace'


class Token(namedtuple('Token', 'kind text')):
    """A maximal run of word or whitespace characters."""

    __slots__ = ()

    @property
    def is_word(self):
        return self.kind == WORD


def tokenize(text):
    """
    Split `text` into word and whitespace tokens.

    >>> [t.text for t in tokenize(u'a  b\\n')]
    ['a', '  ', 'b', '\\n']
    >>> tokenize(u'')
    []
    """
    return [Token(WHITESPACE if m.group().isspace() else WORD, m.group())
            for m in _token_re.finditer(text)]


def token_texts(tokens):
    """Plain strings of `tokens`, the unit the aligner compares."""
    return [t.text for t in tokens]
