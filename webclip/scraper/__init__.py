"""Page loading and clip records built around the content extractor."""

from .scraper import PageLoader, Clip

__all__ = ["PageLoader", "Clip"]
