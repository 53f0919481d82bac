from __future__ import annotations

import xml.etree.ElementTree as ET

import html5lib
from genshi.core import Stream, START, TEXT

from worddiff import DiffConfig, DiffOp, EQUAL, INSERT, DELETE, render_html_diff
from worddiff.render import diff_stream, make_ws_visible


def _local_name(tag: str) -> str:
    # html5lib's etree builder may include the XHTML namespace.
    return tag.split("}", 1)[-1] if "}" in tag else tag


def _parse_fragment(html: str) -> ET.Element:
    root = ET.Element("root")
    for child in html5lib.parseFragment(html, treebuilder="etree"):
        root.append(child)
    return root


def _find_all(root: ET.Element, tag: str) -> list[ET.Element]:
    return [el for el in root.iter() if _local_name(el.tag) == tag]


def _text_content(el: ET.Element) -> str:
    return "".join(el.itertext())


def test_equal_text_is_not_marked():
    out = render_html_diff("same text", "same text")
    assert out == '<div class="diff">same text</div>'


def test_empty_inputs_render_empty_wrapper():
    assert render_html_diff("", "") == '<div class="diff"></div>'


def test_insert_and_delete_markers():
    root = _parse_fragment(render_html_diff("the cat sat", "the dog sat"))
    dels = _find_all(root, "del")
    ins = _find_all(root, "ins")
    assert [_text_content(el) for el in dels] == ["cat"]
    assert [_text_content(el) for el in ins] == ["dog"]
    assert dels[0].get("class") == "diff-removed"
    assert ins[0].get("class") == "diff-added"
    assert _text_content(root) == "the catdog sat"


def test_markup_in_text_is_escaped():
    out = render_html_diff("x <b>y</b>", "x <i>y</i> & z")
    assert "<b>" not in out and "<i>" not in out
    assert "&lt;b&gt;y&lt;/b&gt;" in out
    assert "&amp;" in out
    root = _parse_fragment(out)
    assert not _find_all(root, "b")
    assert [_text_content(el) for el in _find_all(root, "ins")] == [u"<i>y</i> & z"]


def test_whitespace_passes_through_unchanged():
    out = render_html_diff("a\n\n  b", "a\n\n  b c")
    assert out.startswith('<div class="diff">a\n\n  b')


def test_custom_tags_and_classes():
    config = DiffConfig(
        wrapper_element="p",
        wrapper_class=None,
        insert_tag="span",
        delete_tag="span",
    )
    out = render_html_diff("cat sat", "cat ran", config=config)
    assert out == (
        '<p>cat <span class="diff-removed">sat</span>'
        '<span class="diff-added">ran</span></p>'
    )


def test_replacement_pairs_share_diff_id():
    config = DiffConfig(add_diff_ids=True)
    root = _parse_fragment(render_html_diff("a b c", "x b y", config=config))
    dels = _find_all(root, "del")
    ins = _find_all(root, "ins")
    assert [el.get("data-diff-id") for el in dels] == ["1", "2"]
    assert [el.get("data-diff-id") for el in ins] == ["1", "2"]


def test_lone_insert_gets_its_own_diff_id():
    config = DiffConfig(add_diff_ids=True, diff_id_attr="data-change")
    root = _parse_fragment(render_html_diff("a c", "b a c d", config=config))
    ids = [el.get("data-change") for el in _find_all(root, "ins")]
    assert ids == ["1", "2"]


def test_no_diff_ids_by_default():
    out = render_html_diff("cat sat", "cat ran")
    assert "data-diff-id" not in out


def test_whitespace_changes_made_visible():
    config = DiffConfig(preserve_whitespace_in_diff=True)
    root = _parse_fragment(render_html_diff("a b", "a  b", config=config))
    assert [_text_content(el) for el in _find_all(root, "del")] == [u"\u00a0"]
    assert [_text_content(el) for el in _find_all(root, "ins")] == [u"\u00a0\u00a0"]


def test_make_ws_visible_keeps_single_inner_spaces():
    assert make_ws_visible(u"a b") == u"a b"
    assert make_ws_visible(u"") == u""
    assert make_ws_visible(u"  ") == u"\u00a0\u00a0"


def test_diff_stream_events():
    ops = [DiffOp(EQUAL, "a "), DiffOp(DELETE, ""), DiffOp(INSERT, "b")]
    stream = diff_stream(ops)
    assert isinstance(stream, Stream)
    events = list(stream)
    assert [kind for kind, _data, _pos in events].count(START) == 2
    assert [data for kind, data, _pos in events if kind == TEXT] == ["a ", "b"]
