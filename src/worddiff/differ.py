# -*- coding: utf-8 -*-
"""
Word level diff entry points.

Both texts are tokenized, the size guard picks the precise LCS aligner
or the positional line fallback, and the result is merged into runs.
"""
import logging

from .config import DiffConfig, LCS_CELL_LIMIT
from .tokenizer import tokenize, token_texts
from .lcs import build_lcs_table, backtrack
from .line_differ import diff_lines
from .ops import merge_ops

logger = logging.getLogger(__name__)

PRECISE = 'precise'
FALLBACK = 'fallback'


def select_strategy(old_tokens, new_tokens, limit=LCS_CELL_LIMIT):
    """
    Choose the aligner for two token sequences.

    >>> select_strategy(['a'] * 3, ['b'] * 4, limit=12)
    'precise'
    >>> select_strategy(['a'] * 3, ['b'] * 5, limit=12)
    'fallback'
    """
    if len(old_tokens) * len(new_tokens) > limit:
        return FALLBACK
    return PRECISE


def diff(old, new, config=None):
    """
    Diff two texts word by word and return the merged operations.

    >>> diff(u'cat sat', u'cat ran')
    [Equal('cat '), Delete('sat'), Insert('ran')]
    """
    return WordDiffer(old, new, config=config).get_ops()


class WordDiffer(object):
    """Computes the edit script between an old and a new text.

    An instance serves a single comparison; the operations are computed
    on first access and cached.
    """

    def __init__(self, old, new, config=None):
        self.config = config or DiffConfig()
        self.old = old
        self.new = new
        self._old_tokens = token_texts(tokenize(old))
        self._new_tokens = token_texts(tokenize(new))
        self.strategy = select_strategy(
            self._old_tokens, self._new_tokens,
            limit=getattr(self.config, 'lcs_cell_limit', LCS_CELL_LIMIT))
        self._result = None

    def process(self):
        if self.strategy == FALLBACK:
            logger.debug('%d x %d tokens over the LCS cell limit, '
                         'comparing by line position',
                         len(self._old_tokens), len(self._new_tokens))
            self._result = diff_lines(self.old, self.new)
            return
        table = build_lcs_table(self._old_tokens, self._new_tokens)
        self._result = merge_ops(
            backtrack(table, self._old_tokens, self._new_tokens))

    def get_ops(self):
        if self._result is None:
            self.process()
        return list(self._result)

    def get_diff_stream(self):
        from .render import diff_stream
        return diff_stream(self.get_ops(), config=self.config)
