# -*- coding: utf-8 -*-
"""
HTML rendering of diff operations.

Operations become a Genshi event stream: equal runs are plain text,
inserts and deletes are wrapped in ``<ins>`` / ``<del>`` markers.  All
escaping is left to Genshi's serializer.
"""
from genshi.core import Stream, QName, Attrs, START, END, TEXT

from .config import DiffConfig, _leading_space_re, _trailing_space_re, _space_run_re
from .differ import diff
from .ops import EQUAL, INSERT, DELETE

_POS = (None, -1, -1)


def _nbsp_run(match):
    return u'\u00a0' * len(match.group(0))


def make_ws_visible(s):
    """
    Convert whitespace that HTML would collapse into NBSPs, keeping single
    mid-string spaces intact for readability.

    >>> make_ws_visible(u' a  b ') == u'\\xa0a\\xa0\\xa0b\\xa0'
    True
    """
    if not s:
        return s
    s = _leading_space_re.sub(_nbsp_run, s)
    s = _trailing_space_re.sub(_nbsp_run, s)
    return _space_run_re.sub(_nbsp_run, s)


def _class_attrs(classname):
    if classname:
        return Attrs([(QName('class'), classname)])
    return Attrs()


class _StreamBuilder(object):

    def __init__(self, config):
        self.config = config
        self.events = []
        self._diff_id = 0

    def append(self, type, data):
        self.events.append((type, data, _POS))

    def new_diff_id(self):
        self._diff_id += 1
        return str(self._diff_id)

    def change_attrs(self, kind, diff_id=None):
        if kind == INSERT:
            classname = getattr(self.config, 'insert_class', 'diff-added')
        else:
            classname = getattr(self.config, 'delete_class', 'diff-removed')
        attrs = _class_attrs(classname)
        if diff_id is not None:
            attr_name = getattr(self.config, 'diff_id_attr', 'data-diff-id')
            attrs |= [(QName(attr_name), diff_id)]
        return attrs

    def mark_text(self, kind, text, diff_id=None):
        if kind == INSERT:
            tag = QName(getattr(self.config, 'insert_tag', 'ins'))
        else:
            tag = QName(getattr(self.config, 'delete_tag', 'del'))
        if getattr(self.config, 'preserve_whitespace_in_diff', False):
            text = make_ws_visible(text)
        self.append(START, (tag, self.change_attrs(kind, diff_id)))
        self.append(TEXT, text)
        self.append(END, tag)


def diff_stream(ops, config=None):
    """Turn an operation sequence into a Genshi stream."""
    config = config or DiffConfig()
    builder = _StreamBuilder(config)
    wrapper = QName(getattr(config, 'wrapper_element', 'div'))
    add_ids = getattr(config, 'add_diff_ids', False)

    builder.append(START, (wrapper, _class_attrs(getattr(config, 'wrapper_class', 'diff'))))
    prev_kind = None
    diff_id = None
    for op in ops:
        if not op.text:
            continue
        if op.kind == EQUAL:
            builder.append(TEXT, op.text)
        else:
            if add_ids and not (op.kind == INSERT and prev_kind == DELETE):
                diff_id = builder.new_diff_id()
            builder.mark_text(op.kind, op.text, diff_id if add_ids else None)
        prev_kind = op.kind
    builder.append(END, wrapper)
    return Stream(builder.events)


def render_html_diff(old, new, config=None):
    """Renders the word diff between two plain texts as HTML."""
    config = config or DiffConfig()
    stream = diff_stream(diff(old, new, config=config), config=config)
    return stream.render('html', encoding=None,
                         strip_whitespace=getattr(config, 'strip_whitespace', False))
