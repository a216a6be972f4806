"""Lightweight markup renderer for article bodies.

Converts the small markup dialect the editor produces into typed block
nodes (see ``inkwell.models.content``).  The output is a node tree, never an
HTML string, so nothing in an article body can reach the page as markup.

Block rules, one line at a time:

- ``# ``, ``## ``, ``### `` headings
- triple-backtick fences (optional language after the opening fence);
  leading whitespace before either fence line is ignored
- ``- `` and ``1. `` list items; contiguous items of one kind form one list
- blank lines separate paragraphs; any other line joins the open paragraph

Inline rules (headings and paragraphs only): ``**bold**``, ``*italic*``,
`` `code` ``.  Spans do not nest.  The leftmost span wins and, at the same
position, bold beats italic beats code.  Each span closes at the first
matching marker, so ``***x***`` is bold ``*x`` followed by a literal ``*``.
"""

import re

from inkwell.models.content import (
    Bold,
    BlockNode,
    CodeBlock,
    Heading,
    InlineCode,
    Italic,
    ListBlock,
    Paragraph,
    Span,
    Text,
)

FENCE = "```"

_HEADING_MARKERS = (("### ", 3), ("## ", 2), ("# ", 1))
_ORDERED_ITEM_RE = re.compile(r"^\d+\. ")
_INLINE_RE = re.compile(r"\*\*(?P<bold>.+?)\*\*|\*(?P<italic>.+?)\*|`(?P<code>.+?)`")


class MalformedInput(Exception):
    """The markup cannot be rendered (e.g. a code fence is never closed)."""

    pass


def parse_inline(text: str) -> list[Span]:
    """Split *text* into plain and formatted spans."""
    spans: list[Span] = []
    pos = 0
    for match in _INLINE_RE.finditer(text):
        if match.start() > pos:
            spans.append(Text(text=text[pos : match.start()]))
        if match.group("bold") is not None:
            spans.append(Bold(text=match.group("bold")))
        elif match.group("italic") is not None:
            spans.append(Italic(text=match.group("italic")))
        else:
            spans.append(InlineCode(text=match.group("code")))
        pos = match.end()
    if pos < len(text):
        spans.append(Text(text=text[pos:]))
    return spans


def _heading(line: str) -> Heading | None:
    for marker, level in _HEADING_MARKERS:
        if line.startswith(marker):
            text = line[len(marker) :].strip()
            return Heading(level=level, children=parse_inline(text))
    return None


def _list_item(line: str) -> tuple[bool, str] | None:
    """Return (ordered, item text) for a list item line, else None."""
    if line.startswith("- "):
        return False, line[2:].strip()
    match = _ORDERED_ITEM_RE.match(line)
    if match:
        return True, line[match.end() :].strip()
    return None


def _fence_language(line: str) -> tuple[bool, str | None]:
    """Return (is_fence, language) for a candidate opening fence line."""
    line = line.lstrip()
    if not line.startswith(FENCE):
        return False, None
    info = line[len(FENCE) :].strip()
    # Backticks in the info string mean this is inline code, not a fence
    if "`" in info:
        return False, None
    return True, info or None


def render_markup(text: str) -> list[BlockNode]:
    """Render an article body into block nodes.

    Raises MalformedInput when a code fence is opened but never closed.
    Empty input renders to an empty list.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    nodes: list[BlockNode] = []
    paragraph: list[str] = []
    items: list[str] = []
    items_ordered = False

    def flush_paragraph() -> None:
        if paragraph:
            nodes.append(Paragraph(children=parse_inline(" ".join(paragraph))))
            paragraph.clear()

    def flush_list() -> None:
        if items:
            nodes.append(ListBlock(ordered=items_ordered, items=list(items)))
            items.clear()

    i = 0
    while i < len(lines):
        line = lines[i]

        heading = _heading(line)
        if heading is not None:
            flush_paragraph()
            flush_list()
            nodes.append(heading)
            i += 1
            continue

        is_fence, language = _fence_language(line)
        if is_fence:
            flush_paragraph()
            flush_list()
            end = i + 1
            while end < len(lines) and lines[end].strip() != FENCE:
                end += 1
            if end >= len(lines):
                raise MalformedInput(f"Unterminated code fence opened on line {i + 1}")
            code = "\n".join(lines[i + 1 : end])
            nodes.append(CodeBlock(code=code, language=language))
            i = end + 1
            continue

        item = _list_item(line)
        if item is not None:
            ordered, item_text = item
            flush_paragraph()
            if items and ordered != items_ordered:
                flush_list()
            items_ordered = ordered
            items.append(item_text)
            i += 1
            continue

        flush_list()
        if line.strip():
            paragraph.append(line.strip())
        else:
            flush_paragraph()
        i += 1

    flush_paragraph()
    flush_list()
    return nodes
