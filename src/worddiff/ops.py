# -*- coding: utf-8 -*-
"""
Diff operations and the merger that coalesces them into runs.
"""
from collections import namedtuple
from itertools import groupby
from operator import attrgetter

EQUAL = 'equal'
INSERT = 'insert'
DELETE = 'delete'


class DiffOp(namedtuple('DiffOp', 'kind text')):
    """One step of an edit script: `kind` is equal, insert or delete."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%r)' % (self.kind.capitalize(), self.text)


def merge_ops(ops):
    """
    Coalesce adjacent operations of the same kind into single runs.

    Operations with empty text are dropped so that they cannot separate
    two runs of the same kind.

    >>> merge_ops([DiffOp(EQUAL, 'a'), DiffOp(EQUAL, ' '), DiffOp(INSERT, 'b')])
    [Equal('a '), Insert('b')]
    """
    return [DiffOp(kind, u''.join(op.text for op in group))
            for kind, group in groupby((op for op in ops if op.text),
                                       key=attrgetter('kind'))]


def old_text(ops):
    """Rebuild the original text from an operation sequence."""
    return u''.join(op.text for op in ops if op.kind != INSERT)


def new_text(ops):
    """Rebuild the revised text from an operation sequence."""
    return u''.join(op.text for op in ops if op.kind != DELETE)
