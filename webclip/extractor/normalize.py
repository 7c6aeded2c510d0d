"""Whitespace normalization for extracted text."""

import re

# A line break, any blank lines, then another line break
_BLANK_LINE_GAP = re.compile(r"\n\s*\n")


def normalize_text(text: str) -> str:
    """Collapse blank-line gaps to a single blank line and trim.

    Args:
        text: Rendered text of the pruned content

    Returns:
        Normalized text; empty when there is nothing to keep
    """
    if not text:
        return ""
    return _BLANK_LINE_GAP.sub("\n\n", text).strip()
