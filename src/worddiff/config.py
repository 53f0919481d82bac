# -*- coding: utf-8 -*-
"""
Configuration and constants for worddiff.
"""
import re

# Regular expressions (exported for use by other modules)
_token_re = re.compile(r'\S+|\s+', re.U)
_leading_space_re = re.compile(r'^\s+', re.U)
_trailing_space_re = re.compile(r'\s+$', re.U)
_space_run_re = re.compile(r' {2,}')

# Above this many LCS table cells (old tokens * new tokens) the line
# based fallback is used instead of the word aligner.
LCS_CELL_LIMIT = 5000000


class DiffConfig(object):
    """
    Runtime configuration for diffing and rendering.

    Every option is a class attribute and can be overridden per instance::

        DiffConfig(lcs_cell_limit=1000, add_diff_ids=True)
    """

    # Size guard
    lcs_cell_limit = LCS_CELL_LIMIT

    # Rendering
    wrapper_element = 'div'
    wrapper_class = 'diff'
    insert_tag = 'ins'
    delete_tag = 'del'
    insert_class = 'diff-added'
    delete_class = 'diff-removed'

    # Make whitespace-only / whitespace-leading/trailing changes visible in
    # HTML by turning the affected spaces into NBSPs.
    preserve_whitespace_in_diff = False

    # --- Optional: stable IDs on change markers for per-change Apply/Reject ---
    #
    # A delete immediately followed by an insert is one replacement and both
    # markers get the same id. We use a data-* attribute because HTML `id`
    # MUST be unique in the document.
    add_diff_ids = False
    diff_id_attr = 'data-diff-id'

    # Forwarded to Genshi's HTML serializer. Off so that text runs come out
    # exactly as they went in.
    strip_whitespace = False

    def __init__(self, **options):
        for name, value in options.items():
            if not hasattr(type(self), name):
                raise TypeError('unknown diff option %r' % name)
            setattr(self, name, value)

    def __repr__(self):
        return '<DiffConfig lcs_cell_limit=%r>' % self.lcs_cell_limit
