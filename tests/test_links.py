"""Links payload rendering tests."""

import pytest

from src.browser.browser import format_links
from src.browser.errors import InvalidContentError


def test_format_links_header_and_items():
    rendered = format_links("https://x.com", '[{"Title":"Example","Link":"https://example.com"}]')
    lines = rendered.splitlines()
    assert lines[0] == "Links list from URL 'https://x.com'"
    assert lines[-1] == "- [Example](https://example.com)"


def test_format_links_skips_entries_without_link():
    raw = '[{"Title":"A","Link":"https://a.com"},{"Title":"B"},{"Link":"https://c.com"}]'
    rendered = format_links("https://x.com", raw)
    assert "- [A](https://a.com)" in rendered
    assert "- [UNTITLED](https://c.com)" in rendered
    assert "[B]" not in rendered


def test_format_links_empty_list():
    assert format_links("https://x.com", "[]") == "Links list from URL 'https://x.com'\n"


@pytest.mark.parametrize(
    "raw",
    [
        '{"Title":"A"}',
        "not json",
        '"string"',
        '[{"Title": 5, "Link": "https://a.com"}]',
        '[{"Title": ["x"], "Link": "https://a.com"}]',
        '[{"Title": "A", "Link": {"href": "https://a.com"}}]',
    ],
)
def test_format_links_rejects_unexpected_payload(raw):
    with pytest.raises(InvalidContentError):
        format_links("https://x.com", raw)
