"""Document tree adapter and rendered-text projection."""

from .render import rendered_text, rendered_length, is_hidden
from .tree import DocumentTree

__all__ = ["DocumentTree", "rendered_text", "rendered_length", "is_hidden"]
