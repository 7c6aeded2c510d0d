"""Tests for the rendered-text projection."""

import pytest
from bs4 import BeautifulSoup

from webclip.dom import DocumentTree, rendered_text, is_hidden


def render(html: str) -> str:
    return rendered_text(BeautifulSoup(html, "html.parser"))


class TestRenderedText:
    """Test cases for innerText-style rendering."""

    def test_paragraphs_are_separated_by_blank_line(self):
        """Test that paragraphs require two line breaks."""
        assert render("<p>Hello   <b>world</b></p><p>Next</p>") == "Hello world\n\nNext"

    def test_blocks_are_separated_by_single_line(self):
        """Test that block elements start a new line."""
        assert render("<div>One</div><div>Two</div>") == "One\nTwo"

    def test_whitespace_between_blocks_is_dropped(self):
        """Test that source indentation does not leak into the output."""
        html = """
        <div>
            <p>First</p>
            <p>Second</p>
        </div>
        """
        assert render(html) == "First\n\nSecond"

    def test_line_break_element(self):
        """Test that <br> produces a newline."""
        assert render("<div>one<br>two</div>") == "one\ntwo"

    def test_preformatted_whitespace_is_kept(self):
        """Test that whitespace inside <pre> is left alone."""
        assert render("<pre>  a\n    b</pre>") == "  a\n    b"

    def test_table_cells_are_tab_separated(self):
        """Test table rows and cells."""
        html = "<table><tr><td>a</td><td>b</td></tr><tr><td>c</td><td>d</td></tr></table>"
        assert render(html) == "a\tb\nc\td"

    def test_hidden_content_is_skipped(self):
        """Test scripts, styles and hidden elements."""
        html = """
        <div>Visible<span style="display: none">Secret</span><span hidden>Also</span>
        <script>x()</script><style>p { color: red; }</style>
        <span style="visibility:hidden">Ghost</span></div>
        """
        assert render(html) == "Visible"

    def test_comments_are_skipped(self):
        """Test that HTML comments do not render."""
        assert render("<div>a<!-- note -->b</div>") == "ab"

    def test_non_breaking_space_is_preserved(self):
        """Test that &nbsp; is not collapsed like ordinary whitespace."""
        assert render("<p>a&nbsp;&nbsp;b</p>") == "a\xa0\xa0b"

    def test_empty_document(self):
        """Test rendering of a document without text."""
        assert render("<div><span></span></div>") == ""


@pytest.mark.parametrize("html,hidden", [
    ("<script></script>", True),
    ("<div hidden></div>", True),
    ('<input type="hidden">', True),
    ('<div style="DISPLAY:NONE"></div>', True),
    ('<div style="display: block"></div>', False),
    ('<div class="hidden"></div>', False),
])
def test_is_hidden(html, hidden):
    tag = BeautifulSoup(html, "html.parser").find(True)
    assert is_hidden(tag) is hidden


def test_hidden_root_renders_nothing():
    tree = DocumentTree.from_html("<article hidden>Secret text</article>")
    assert tree.rendered_length(tree.query_first("article")) == 0


def test_deeply_nested_page():
    depth = 2000
    tree = DocumentTree.from_html("<div>" * depth + "deep" + "</div>" * depth)
    assert tree.rendered_text(tree.root) == "deep"


def test_hidden_ancestor_hides_node():
    tree = DocumentTree.from_html(
        '<div style="display:none"><section><p>Invisible</p></section></div><p>Shown</p>'
    )
    assert tree.rendered_text(tree.query_first("section")) == ""
    assert tree.rendered_text(tree.query_first("p")) == ""
    assert tree.rendered_text(tree.root) == "Shown"
