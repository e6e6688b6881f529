"""Unit tests for the markdown subset transcoder."""

import pytest

from cvpress.contexts.templating.markdown_transcoder import (
    KIND,
    LineNode,
    classify_line,
    parse_lines,
    render_nodes,
    transcode,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line,kind,text",
    [
        ("# Title", KIND.HEADING_1, "Title"),
        ("## Sub", KIND.HEADING_2, "Sub"),
        ("### Minor", KIND.HEADING_3, "Minor"),
        ("- Item", KIND.LIST_ITEM, "Item"),
        ("* Item", KIND.LIST_ITEM, "Item"),
        ("", KIND.BLANK, ""),
        ("Plain text", KIND.TEXT, "Plain text"),
        ("#### Too deep", KIND.TEXT, "#### Too deep"),
        ("#NoSpace", KIND.TEXT, "#NoSpace"),
        ("-NoSpace", KIND.TEXT, "-NoSpace"),
        ("   ", KIND.TEXT, "   "),
    ],
)
def test_classify_line(line, kind, text):
    """Each line maps to exactly one node kind."""
    node = classify_line(line)
    assert node.kind == kind
    assert node.text == text


@pytest.mark.unit
def test_heading_level_1():
    assert transcode("# Title") == "<h1>Title</h1>"


@pytest.mark.unit
def test_heading_with_blank_line_and_body():
    """Blank line becomes two line breaks between heading and body."""
    assert transcode("## Sub\n\nBody") == "<h2>Sub</h2><br><br>Body"


@pytest.mark.unit
def test_list_items_have_no_container():
    result = transcode("- Item A\n- Item B")

    assert result == "<li>Item A</li>\n<li>Item B</li>"
    assert "<ul>" not in result
    assert "<ol>" not in result


@pytest.mark.unit
def test_mixed_document():
    content = "# Jane Doe\n## Experience\n### Acme Corp\n* Built things\nShipped widgets"
    assert transcode(content) == (
        "<h1>Jane Doe</h1>\n<h2>Experience</h2>\n<h3>Acme Corp</h3>\n"
        "<li>Built things</li>\nShipped widgets"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "content,expected",
    [
        ("a\n\nb", "a<br><br>b"),
        ("a\n\n\nb", "a<br><br>\nb"),
        ("a\n\n\n\nb", "a<br><br><br><br>b"),
        ("a\n", "a\n"),
        ("\n\na", "<br><br>a"),
        ("a\n\n", "a<br><br>"),
    ],
)
def test_newline_runs(content, expected):
    """Pairs of newlines become double breaks; an odd leftover newline is kept."""
    assert transcode(content) == expected


@pytest.mark.unit
@pytest.mark.parametrize("content", ["", None])
def test_empty_content(content):
    assert transcode(content) == ""


@pytest.mark.unit
def test_content_is_not_escaped():
    """Raw HTML in content passes through untouched."""
    content = "<b>bold</b> & <i>more</i>"
    assert transcode(content) == content


@pytest.mark.unit
def test_wrap_lists_groups_adjacent_items():
    result = transcode("## Skills\n- A\n- B\n\n- C", wrap_lists=True)

    assert result == "<h2>Skills</h2>\n<ul><li>A</li>\n<li>B</li></ul><br><br><ul><li>C</li></ul>"


@pytest.mark.unit
def test_wrap_lists_closes_before_text():
    assert transcode("- A\nafter", wrap_lists=True) == "<ul><li>A</li></ul>\nafter"


@pytest.mark.unit
def test_render_nodes_matches_transcode():
    content = "# T\n\n- x\ny"
    assert render_nodes(parse_lines(content)) == transcode(content)


@pytest.mark.unit
def test_line_node_html():
    assert LineNode(KIND.HEADING_3, "x").to_html() == "<h3>x</h3>"
    assert LineNode(KIND.LIST_ITEM, "x").to_html() == "<li>x</li>"
    assert LineNode(KIND.TEXT, "x").to_html() == "x"


@pytest.mark.unit
def test_crlf_line_endings_stay_outside_tags():
    result = transcode("# Title\r\n- Item\r\nplain\r")

    assert result == "<h1>Title</h1>\r\n<li>Item</li>\r\nplain\r"
