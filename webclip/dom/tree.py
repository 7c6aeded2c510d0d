"""Read-only view over a parsed page used as the extractor's input."""

import copy
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from webclip.dom.render import rendered_length, rendered_text
from webclip.exceptions import InvalidInput

# (tag name, sorted attributes) for every element, in document order
Snapshot = List[Tuple[str, Tuple[Tuple[str, str], ...]]]


class DocumentTree:
    """A parsed document exposing the queries the extractor relies on.

    The wrapped soup belongs to the caller. Nothing in this class edits it;
    destructive work goes through :meth:`clone` first.
    """

    def __init__(self, soup: BeautifulSoup):
        if soup is None:
            raise InvalidInput("No document tree supplied")
        if not isinstance(soup, BeautifulSoup):
            raise InvalidInput(f"Expected a parsed document, got {type(soup).__name__}")
        if soup.decomposed:
            raise InvalidInput("Document tree has been decomposed")
        self.soup = soup

    @classmethod
    def from_html(cls, markup: Union[str, bytes]) -> "DocumentTree":
        """Parse markup into a tree."""
        return cls(BeautifulSoup(markup, "html.parser"))

    @property
    def root(self) -> BeautifulSoup:
        return self.soup

    @property
    def body(self) -> Tag:
        """The ``<body>`` element, or the whole document when there is none."""
        body = self.root.find("body")
        return body if body is not None else self.root

    @property
    def title(self) -> Optional[str]:
        """Page title from ``<title>``, falling back to the first ``<h1>``."""
        for name in ("title", "h1"):
            tag = self.root.find(name)
            if tag is not None:
                text = tag.get_text(strip=True)
                if text:
                    return text
        return None

    def query_first(self, selector: str) -> Optional[Tag]:
        return self.root.select_one(selector)

    def rendered_text(self, node: Tag) -> str:
        return rendered_text(node)

    def rendered_length(self, node: Tag) -> int:
        return rendered_length(node)

    @staticmethod
    def clone(node: Tag) -> Tag:
        """Deep copy of ``node``, detached from any document."""
        return copy.copy(node)

    @staticmethod
    def remove(node: Tag) -> None:
        node.decompose()

    def count_nodes(self) -> int:
        return sum(1 for _ in self.root.descendants)

    def snapshot(self) -> Snapshot:
        """Structural fingerprint for detecting changes to the tree."""
        return [
            (tag.name, tuple(sorted((key, str(value)) for key, value in tag.attrs.items())))
            for tag in self.root.find_all(True)
        ]
