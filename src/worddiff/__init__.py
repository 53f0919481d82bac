# -*- coding: utf-8 -*-
"""
    worddiff
    ~~~~~~~~

    Word level diffs of plain text.  Meant to show a reader how a
    rewritten document differs from the one they uploaded.  Examples:

    >>> from worddiff import diff, render_html_diff

    >>> diff('cat sat', 'cat ran')
    [Equal('cat '), Delete('sat'), Insert('ran')]

    >>> diff('same text', 'same text')
    [Equal('same text')]

    >>> print(render_html_diff('Hello world', 'Hello there world'))
    <div class="diff">Hello<ins class="diff-added"> there</ins> world</div>

    >>> print(render_html_diff('a < b', 'a > b'))
    <div class="diff">a <del class="diff-removed">&lt;</del><ins class="diff-added">&gt;</ins> b</div>
"""
from .config import DiffConfig
from .ops import DiffOp, EQUAL, INSERT, DELETE
from .tokenizer import Token, tokenize
from .differ import WordDiffer, diff
from .render import diff_stream, render_html_diff
from .stats import DiffStats, diff_stats

__all__ = [
    'diff',
    'render_html_diff',
    'diff_stream',
    'diff_stats',
    'DiffStats',
    'DiffConfig',
    'DiffOp',
    'EQUAL',
    'INSERT',
    'DELETE',
    'Token',
    'tokenize',
    'WordDiffer',
]
