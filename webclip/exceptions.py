"""Exceptions raised by the content extractor."""


class ExtractionError(Exception):
    """Base class for extraction failures."""


class InvalidInput(ExtractionError):
    """The document tree handed to the extractor is missing or unusable."""
