# -*- coding: utf-8 -*-
"""
Positional line comparison used for inputs too large for the aligner.

Line ``k`` of the old text is only ever compared with line ``k`` of the
new text.  Shifted or reordered lines are not realigned, which keeps the
cost linear and the output reproducible.
"""
from itertools import zip_longest

from .ops import DiffOp, EQUAL, INSERT, DELETE, merge_ops


def longzip(a, b):
    """Like `zip` but yields `None` for missing items."""
    return zip_longest(a, b)


def split_lines(text):
    """
    Split on ``\\n`` and put the newline back on every line but the last.

    >>> split_lines(u'A\\nB')
    ['A\\n', 'B']
    >>> split_lines(u'A\\n')
    ['A\\n', '']
    """
    lines = text.split(u'\n')
    last = len(lines) - 1
    return [line + u'\n' if idx < last else line
            for idx, line in enumerate(lines)]


def _line_pair_ops(old_line, new_line):
    if old_line == new_line:
        return [DiffOp(EQUAL, new_line)]
    # Same line where only one side still has a line after it.
    if old_line.rstrip(u'\n') == new_line.rstrip(u'\n'):
        common = new_line.rstrip(u'\n')
        if old_line.endswith(u'\n'):
            return [DiffOp(EQUAL, common), DiffOp(DELETE, u'\n')]
        return [DiffOp(EQUAL, common), DiffOp(INSERT, u'\n')]
    return [DiffOp(DELETE, old_line), DiffOp(INSERT, new_line)]


def diff_lines(old_text, new_text):
    """
    Compare two texts line by line at equal positions.

    >>> diff_lines(u'A\\nB', u'B\\nA')
    [Delete('A\\n'), Insert('B\\n'), Delete('B'), Insert('A')]
    """
    ops = []
    for old_line, new_line in longzip(split_lines(old_text),
                                      split_lines(new_text)):
        if new_line is None:
            ops.append(DiffOp(DELETE, old_line))
        elif old_line is None:
            ops.append(DiffOp(INSERT, new_line))
        else:
            ops.extend(_line_pair_ops(old_line, new_line))
    return merge_ops(ops)
