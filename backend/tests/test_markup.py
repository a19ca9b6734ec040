from __future__ import annotations

from mapstyle.markup import attr, encode, tag, tag_close, to_str


def test_to_str_matches_stylesheet_rendering():
    assert to_str(2) == "2"
    assert to_str(2.0) == "2"
    assert to_str(0.5) == "0.5"
    assert to_str(True) == "true"
    assert to_str(None) == "null"
    assert to_str([1, 2]) == "1,2"


def test_encode_escapes_markup_characters():
    assert encode('a & <b> "c"') == "a &amp; &lt;b&gt; &quot;c&quot;"
    assert encode(None) == ""


def test_tag_and_tag_close():
    assert tag_close("LineSymbolizer", [("stroke", "#555")]) == '<LineSymbolizer stroke="#555"/>'
    assert tag("Rule", "") == "<Rule></Rule>"
    assert tag("Style", "<Rule></Rule>", [("name", "style-0")]) == (
        '<Style name="style-0"><Rule></Rule></Style>'
    )
    assert attr([]) == ""


def test_passthrough_mode_leaves_values_alone():
    assert tag_close("X", [("v", "a&b")], escape=False) == '<X v="a&b"/>'
    assert tag_close("X", [("v", "a&b")]) == '<X v="a&amp;b"/>'


def test_encode_drops_characters_xml_cannot_carry():
    assert encode("a\x01b\x1fc") == "abc"
    assert encode("tab\there\nnl\rcr") == "tab\there\nnl\rcr"
