# -*- coding: utf-8 -*-
"""
Longest common subsequence alignment of two token sequences.

The table is a flat array of unsigned integers indexed by
``i * (n + 1) + j``.  Entries never exceed ``min(m, n)``, so 16 bit cells
are used whenever that bound fits and 32 bit cells otherwise.
"""
from array import array

from .ops import DiffOp, EQUAL, INSERT, DELETE


class LCSTable(object):
    """``table[i, j]`` is the LCS length of ``old[:i]`` and ``new[:j]``."""

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows, cols, cells):
        self.rows = rows
        self.cols = cols
        self.cells = cells

    def __getitem__(self, pos):
        i, j = pos
        return self.cells[i * (self.cols + 1) + j]

    @property
    def length(self):
        """Length of the longest common subsequence of both inputs."""
        return self[self.rows, self.cols]


def _typecode(bound):
    if bound < 0xFFFF:
        return 'H'
    return 'L'


def build_lcs_table(old, new):
    """
    Fill the LCS table for the sequences `old` and `new`.

    Items are compared with ``==``, so for token strings the match is
    exact, case and whitespace sensitive.

    >>> build_lcs_table(['a', ' ', 'b'], ['a', ' ', 'c']).length
    2
    """
    m = len(old)
    n = len(new)
    width = n + 1
    cells = array(_typecode(min(m, n)), [0]) * ((m + 1) * width)
    for i in range(1, m + 1):
        item = old[i - 1]
        row = i * width
        prev = row - width
        for j in range(1, width):
            if item == new[j - 1]:
                cells[row + j] = cells[prev + j - 1] + 1
            else:
                up = cells[prev + j]
                left = cells[row + j - 1]
                cells[row + j] = up if up >= left else left
    return LCSTable(m, n, cells)


def backtrack(table, old, new):
    """
    Walk `table` from the bottom right corner back to the origin and
    return the edit script in reading order (unmerged, one op per token).

    On a tie between consuming from `new` and consuming from `old` the
    insert wins, so a replaced token always comes out as delete then
    insert.
    """
    ops = []
    i = table.rows
    j = table.cols
    while i > 0 or j > 0:
        if i > 0 and j > 0 and old[i - 1] == new[j - 1]:
            ops.append(DiffOp(EQUAL, new[j - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i, j - 1] >= table[i - 1, j]):
            ops.append(DiffOp(INSERT, new[j - 1]))
            j -= 1
        else:
            ops.append(DiffOp(DELETE, old[i - 1]))
            i -= 1
    ops.reverse()
    return ops
