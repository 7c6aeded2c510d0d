"""Page loader turning URLs and saved pages into clip records."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from webclip.config import settings
from webclip.dom import DocumentTree
from webclip.exceptions import InvalidInput
from webclip.extractor import ContentExtractor
from webclip.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Clip:
    """Extracted page content ready to hand to a sync client."""
    url: str
    title: str
    content: str
    tags: List[str] = field(default_factory=list)
    success: bool = True
    error_message: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        """Outbound record as sent to the storage service."""
        return {
            "title": self.title,
            "content": self.content,
            "url": self.url,
            "tags": list(self.tags),
        }


class PageLoader:
    """Loads pages and runs the content extractor on them."""

    def __init__(self, extractor: Optional[ContentExtractor] = None):
        self.session = self._create_session()
        self.extractor = extractor or ContentExtractor()

    def _create_session(self) -> requests.Session:
        """Create a requests session with retry strategy."""
        session = requests.Session()

        # Configure retry strategy
        retry_strategy = Retry(
            total=settings.max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({
            'User-Agent': settings.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        })

        return session

    def validate_url(self, url: str) -> str:
        """Validate and normalize URL."""
        url = url.strip()
        if not url.startswith(('http://', 'https://')):
            url = 'https://' + url

        parsed = urlparse(url)
        if not parsed.netloc:
            raise ValueError(f"Invalid URL: {url}")

        return url

    def load(self, url: str) -> DocumentTree:
        """Fetch ``url`` and parse it into a document tree."""
        url = self.validate_url(url)
        logger.info(f"Loading page: {url}")

        response = self.session.get(url, timeout=settings.request_timeout)
        response.raise_for_status()

        return DocumentTree.from_html(response.content)

    def load_file(self, path: Union[str, Path]) -> DocumentTree:
        """Parse a saved HTML page from disk."""
        path = Path(path)
        logger.info(f"Loading file: {path}")
        return DocumentTree.from_html(path.read_text(encoding="utf-8", errors="replace"))

    def _build_clip(
        self,
        document: DocumentTree,
        url: str,
        title: Optional[str],
        tags: Optional[List[str]]
    ) -> Clip:
        content = self.extractor.extract(document)
        return Clip(
            url=url,
            title=title or document.title or settings.untitled_title,
            content=content,
            tags=list(tags) if tags is not None else settings.default_tags(),
        )

    def _placeholder_clip(
        self,
        url: str,
        title: Optional[str],
        tags: Optional[List[str]],
        error_msg: str
    ) -> Clip:
        return Clip(
            url=url,
            title=title or settings.untitled_title,
            content=settings.placeholder_text,
            tags=list(tags) if tags is not None else settings.default_tags(),
            success=False,
            error_message=error_msg,
        )

    def clip(
        self,
        url: str,
        title: Optional[str] = None,
        tags: Optional[List[str]] = None
    ) -> Clip:
        """Load a page and extract its content into a clip.

        Args:
            url: Page to clip
            title: Title to use instead of the page's own
            tags: Tags for the record (defaults from settings)

        Returns:
            Clip; carries the placeholder text when the page was not usable
        """
        try:
            document = self.load(url)
            clip = self._build_clip(document, self.validate_url(url), title, tags)
            logger.info(f"Clipped {len(clip.content)} characters from {clip.url}")
            return clip

        except requests.RequestException as e:
            error_msg = f"Request failed: {e}"
        except ValueError as e:
            error_msg = str(e)
        except InvalidInput as e:
            error_msg = f"Unusable page: {e}"

        logger.error(f"Failed to clip {url}: {error_msg}")
        return self._placeholder_clip(url, title, tags, error_msg)

    def clip_file(
        self,
        path: Union[str, Path],
        title: Optional[str] = None,
        tags: Optional[List[str]] = None
    ) -> Clip:
        """Extract a saved HTML page into a clip."""
        path = Path(path)
        url = path.resolve().as_uri()
        try:
            document = self.load_file(path)
            return self._build_clip(document, url, title, tags)

        except OSError as e:
            error_msg = f"Could not read file: {e}"
        except InvalidInput as e:
            error_msg = f"Unusable page: {e}"

        logger.error(f"Failed to clip {path}: {error_msg}")
        return self._placeholder_clip(url, title, tags, error_msg)
