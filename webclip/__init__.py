"""Main-content extraction for web pages."""

from webclip.dom import DocumentTree
from webclip.exceptions import ExtractionError, InvalidInput
from webclip.extractor import ContentExtractor, ExtractionResult, extract_content

__version__ = "0.1.0"

__all__ = [
    "DocumentTree",
    "ContentExtractor",
    "ExtractionResult",
    "extract_content",
    "ExtractionError",
    "InvalidInput",
]
