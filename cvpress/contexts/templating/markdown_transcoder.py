"""
Markdown Subset Transcoder

Converts the constrained line-oriented markup used for resume bodies into HTML
fragments. Only a fixed set of line patterns is recognized:

    "# Title"     -> <h1>Title</h1>
    "## Title"    -> <h2>Title</h2>
    "### Title"   -> <h3>Title</h3>
    "- Item"      -> <li>Item</li>   (also "* Item")
    blank line    -> <br><br>

Everything else passes through untouched. Content is NOT escaped: callers
are trusted to supply markup that is safe to embed in the document.

List items are emitted as bare <li> fragments without an enclosing <ul>
unless wrap_lists=True is requested.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class LinePatterns:
    """Line prefixes recognized by the classifier."""

    HEADING_1: str = "# "
    HEADING_2: str = "## "
    HEADING_3: str = "### "
    LIST_ITEM_MARKERS: tuple = ("* ", "- ")
    LINE_BREAK: str = "<br><br>"


@dataclass(frozen=True)
class LineKind:
    """Node kinds produced by classify_line()."""

    HEADING_1: str = "heading_1"
    HEADING_2: str = "heading_2"
    HEADING_3: str = "heading_3"
    LIST_ITEM: str = "list_item"
    BLANK: str = "blank"
    TEXT: str = "text"


PATTERNS = LinePatterns()
KIND = LineKind()

HEADING_LEVELS = {KIND.HEADING_1: 1, KIND.HEADING_2: 2, KIND.HEADING_3: 3}


@dataclass(frozen=True)
class LineNode:
    """
    A single classified line.

    Attributes:
        kind: One of the LineKind values
        text: Line text with the recognized prefix stripped
        line_end: Carriage return trailing a CRLF line, emitted after the tag
    """

    kind: str
    text: str = ""
    line_end: str = ""

    def to_html(self) -> str:
        if self.kind in HEADING_LEVELS:
            level = HEADING_LEVELS[self.kind]
            return f"<h{level}>{self.text}</h{level}>{self.line_end}"
        if self.kind == KIND.LIST_ITEM:
            return f"<li>{self.text}</li>{self.line_end}"
        return self.text


def classify_line(line: str) -> LineNode:
    """
    Classify one line of markup.

    A heading prefix must be followed by a space, so "#### x" and "#x" are
    plain text. An empty line is BLANK; whitespace-only lines are TEXT.
    A trailing "\\r" stays outside heading and list tags.
    """
    if line == "":
        return LineNode(KIND.BLANK)

    body = line[:-1] if line.endswith("\r") else line
    line_end = line[len(body) :]

    if body.startswith(PATTERNS.HEADING_1):
        return LineNode(KIND.HEADING_1, body[len(PATTERNS.HEADING_1) :], line_end)
    if body.startswith(PATTERNS.HEADING_2):
        return LineNode(KIND.HEADING_2, body[len(PATTERNS.HEADING_2) :], line_end)
    if body.startswith(PATTERNS.HEADING_3):
        return LineNode(KIND.HEADING_3, body[len(PATTERNS.HEADING_3) :], line_end)
    for marker in PATTERNS.LIST_ITEM_MARKERS:
        if body.startswith(marker):
            return LineNode(KIND.LIST_ITEM, body[len(marker) :], line_end)
    return LineNode(KIND.TEXT, line)


def parse_lines(content: str) -> List[LineNode]:
    """Split content on newlines and classify every line."""
    return [classify_line(line) for line in content.split("\n")]


def _newline_run(count: int) -> str:
    """
    Render a run of consecutive newline characters.

    Each pair becomes a double line break; an odd newline left over is kept.
    """
    return PATTERNS.LINE_BREAK * (count // 2) + "\n" * (count % 2)


def render_nodes(nodes: Iterable[LineNode], wrap_lists: bool = False) -> str:
    """
    Render classified lines back into an HTML fragment.

    Args:
        nodes: Output of parse_lines()
        wrap_lists: Wrap runs of adjacent list items in <ul></ul>

    Returns:
        HTML fragment
    """
    parts = []
    newlines = 0
    in_list = False

    for index, node in enumerate(nodes):
        if index:
            newlines += 1
        if node.kind == KIND.BLANK:
            continue

        separator = _newline_run(newlines)
        newlines = 0

        if wrap_lists:
            is_item = node.kind == KIND.LIST_ITEM
            # A blank line between items ends the list
            if in_list and (not is_item or separator != "\n"):
                parts.append("</ul>")
                in_list = False
            parts.append(separator)
            if is_item and not in_list:
                parts.append("<ul>")
                in_list = True
        else:
            parts.append(separator)

        parts.append(node.to_html())

    if in_list:
        parts.append("</ul>")
    parts.append(_newline_run(newlines))

    return "".join(parts)


def transcode(content: Optional[str], wrap_lists: bool = False) -> str:
    """
    Convert markup content into an HTML fragment.

    Args:
        content: Raw markup; None or "" yields ""
        wrap_lists: Wrap list items in <ul> (off by default for compatibility)

    Returns:
        HTML fragment

    Examples:
        >>> transcode("## Sub\\n\\nBody")
        '<h2>Sub</h2><br><br>Body'

        >>> transcode("- Item A\\n- Item B")
        '<li>Item A</li>\\n<li>Item B</li>'
    """
    if not content:
        return ""
    return render_nodes(parse_lines(content), wrap_lists=wrap_lists)
