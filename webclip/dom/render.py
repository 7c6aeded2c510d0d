"""Rendered-text projection of a parsed document.

Approximates a browser's ``innerText``: only text a reader would see is
kept, whitespace is collapsed the way CSS does for normal flow, and block
boundaries become line breaks.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple, Union

from bs4 import NavigableString, Tag
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

# Elements whose subtree never shows up as text on screen
NON_RENDERED_TAGS = frozenset({
    "script", "style", "noscript", "template", "head", "title",
    "iframe", "object", "embed", "canvas", "audio", "video",
})

# Elements that keep their whitespace as written
PREFORMATTED_TAGS = frozenset({"pre", "textarea", "listing", "plaintext"})

BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "caption", "center",
    "dd", "details", "dialog", "dir", "div", "dl", "dt", "fieldset",
    "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5",
    "h6", "header", "hgroup", "hr", "html", "legend", "li", "main", "menu",
    "nav", "ol", "pre", "section", "summary", "table", "tr", "ul",
})

TABLE_CELL_TAGS = ["td", "th"]

_SKIPPED_STRINGS = (CData, Comment, Declaration, Doctype, ProcessingInstruction)
_COLLAPSIBLE = re.compile(r"[ \t\n\r\f]+")
_HIDDEN_STYLE = re.compile(r"(display\s*:\s*none|visibility\s*:\s*hidden)", re.IGNORECASE)

# A text run (text, preformatted) or a required line break count
_Item = Union[Tuple[str, bool], int]


@dataclass
class _Closing:
    """Items emitted once all children of a tag have been visited."""
    items: List[_Item]


def is_hidden(tag: Tag) -> bool:
    """Whether an element is hidden by its tag, attributes or inline style."""
    if tag.name in NON_RENDERED_TAGS:
        return True
    if tag.has_attr("hidden"):
        return True
    if tag.name == "input" and str(tag.get("type", "")).lower() == "hidden":
        return True
    style = tag.get("style")
    return bool(style and _HIDDEN_STYLE.search(str(style)))


def rendered_text(node: Union[Tag, NavigableString]) -> str:
    """Return the visible text of ``node`` with browser-like line breaks."""
    if isinstance(node, Tag) and is_hidden(node):
        return ""
    if any(is_hidden(parent) for parent in node.parents):
        return ""

    if isinstance(node, Tag):
        # The node itself contributes no outer breaks, like innerText
        preformatted = node.name in PREFORMATTED_TAGS
        roots = [(child, preformatted) for child in node.children]
    else:
        roots = [(node, False)]
    return _assemble(_collect(roots))


def _collect(roots) -> List[_Item]:
    items: List[_Item] = []
    # (node, preformatted) pairs still to visit, or _Closing markers
    stack = list(reversed(roots))

    while stack:
        entry = stack.pop()
        if isinstance(entry, _Closing):
            items.extend(entry.items)
            continue

        node, preformatted = entry
        if isinstance(node, NavigableString):
            if isinstance(node, _SKIPPED_STRINGS):
                continue
            text = str(node)
            if not preformatted:
                text = _COLLAPSIBLE.sub(" ", text)
            if text:
                items.append((text, preformatted))
            continue

        if not isinstance(node, Tag) or is_hidden(node):
            continue

        name = node.name
        if name == "br":
            items.append(("\n", True))
            continue

        breaks = 2 if name == "p" else 1 if name in BLOCK_TAGS else 0
        if breaks:
            items.append(breaks)
            stack.append(_Closing([breaks]))
        elif name in TABLE_CELL_TAGS and node.find_next_sibling(TABLE_CELL_TAGS) is not None:
            stack.append(_Closing([("\t", True)]))

        inner_pre = preformatted or name in PREFORMATTED_TAGS
        stack.extend((child, inner_pre) for child in reversed(node.contents))

    return items


def _assemble(items: List[_Item]) -> str:
    chunks: List[str] = []
    pending_break = 0
    pending_space = False

    for item in items:
        if isinstance(item, int):
            pending_break = max(pending_break, item)
            # Spaces never survive at the end of a line
            pending_space = False
            continue

        text, preformatted = item
        trailing_space = False
        if not preformatted:
            at_line_start = bool(pending_break) or not chunks or chunks[-1].endswith("\n")
            if text.startswith(" "):
                if not at_line_start:
                    pending_space = True
                text = text.lstrip(" ")
            if not text:
                continue
            trailing_space = text.endswith(" ")
            text = text.rstrip(" ")

        if pending_break and chunks:
            chunks.append("\n" * pending_break)
        elif pending_space and not text[:1].isspace():
            chunks.append(" ")
        pending_break = 0
        pending_space = trailing_space
        chunks.append(text)

    return "".join(chunks)


def rendered_length(node: Union[Tag, NavigableString]) -> int:
    return len(rendered_text(node))
