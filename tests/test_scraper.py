"""Tests for the page loader."""

import pytest
import sys
from pathlib import Path
from unittest.mock import MagicMock

import requests

# Add project root to path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

from webclip.config import settings
from webclip.scraper import PageLoader, Clip

ARTICLE_PAGE = (
    "<html><head><title>A Story</title></head><body>"
    "<nav>Home | About</nav>"
    f"<article><h1>Headline</h1><p>{'word ' * 60}</p></article>"
    "<footer>Copyright</footer>"
    "</body></html>"
)


def fake_response(html: str) -> MagicMock:
    response = MagicMock()
    response.content = html.encode("utf-8")
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def loader():
    loader = PageLoader()
    loader.session = MagicMock()
    return loader


class TestPageLoader:
    """Test cases for the PageLoader class."""

    def test_url_validation(self):
        """Test URL validation functionality."""
        loader = PageLoader()

        # Test valid URLs
        assert loader.validate_url("https://example.com") == "https://example.com"
        assert loader.validate_url("http://example.com") == "http://example.com"
        assert loader.validate_url("example.com") == "https://example.com"

        # Test invalid URLs
        with pytest.raises(ValueError):
            loader.validate_url("")

    def test_session_creation(self):
        """Test that session is created properly."""
        loader = PageLoader()
        assert loader.session is not None
        assert "User-Agent" in loader.session.headers

    def test_clip_success(self, loader):
        """Test clipping a reachable page."""
        loader.session.get.return_value = fake_response(ARTICLE_PAGE)

        clip = loader.clip("example.com/story")

        loader.session.get.assert_called_once_with(
            "https://example.com/story", timeout=settings.request_timeout
        )
        assert clip.success
        assert clip.error_message is None
        assert clip.url == "https://example.com/story"
        assert clip.title == "A Story"
        assert clip.content.startswith("Headline\n\nword word")
        assert "Home" not in clip.content
        assert "Copyright" not in clip.content
        assert clip.tags == settings.default_tags()

    def test_clip_overrides(self, loader):
        """Test explicit title and tags."""
        loader.session.get.return_value = fake_response(ARTICLE_PAGE)

        clip = loader.clip("https://example.com", title="Mine", tags=["read-later"])

        assert clip.title == "Mine"
        assert clip.tags == ["read-later"]

    def test_untitled_page(self, loader):
        """Test the title fallback for pages without title or heading."""
        loader.session.get.return_value = fake_response("<body><p>text</p></body>")

        clip = loader.clip("https://example.com")

        assert clip.title == settings.untitled_title
        assert clip.content == "text"

    def test_request_failure_uses_placeholder(self, loader):
        """Test that an unreachable page yields the placeholder text."""
        loader.session.get.side_effect = requests.ConnectionError("offline")

        clip = loader.clip("https://example.com", title="Kept")

        assert not clip.success
        assert clip.content == settings.placeholder_text
        assert clip.title == "Kept"
        assert "offline" in clip.error_message

    def test_http_error_uses_placeholder(self, loader):
        """Test that an error status yields the placeholder text."""
        response = fake_response("")
        response.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")
        loader.session.get.return_value = response

        clip = loader.clip("https://example.com")

        assert not clip.success
        assert clip.content == settings.placeholder_text
        assert clip.title == settings.untitled_title

    def test_invalid_url_uses_placeholder(self, loader):
        """Test that a malformed URL is reported without a request."""
        clip = loader.clip("https://")

        assert not clip.success
        assert clip.content == settings.placeholder_text
        loader.session.get.assert_not_called()

    def test_clip_file(self, loader, tmp_path):
        """Test clipping a saved page."""
        page = tmp_path / "story.html"
        page.write_text(ARTICLE_PAGE, encoding="utf-8")

        clip = loader.clip_file(page)

        assert clip.success
        assert clip.url.startswith("file://")
        assert clip.title == "A Story"
        assert "Headline" in clip.content

    def test_missing_file_uses_placeholder(self, loader, tmp_path):
        """Test that an unreadable file yields the placeholder text."""
        clip = loader.clip_file(tmp_path / "missing.html")

        assert not clip.success
        assert clip.content == settings.placeholder_text


def test_clip_record_shape():
    clip = Clip(url="https://example.com", title="T", content="Body", tags=["web-clip"])
    assert clip.to_record() == {
        "title": "T",
        "content": "Body",
        "url": "https://example.com",
        "tags": ["web-clip"],
    }
