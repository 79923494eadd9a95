"""Content kinds served by the scraper, each with its own size threshold."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.config import Settings

MIN_LINKS_CONTENT_SIZE = 10
MIN_MD_CONTENT_SIZE = 50
MIN_HTML_CONTENT_SIZE = 300
MIN_IMG_CONTENT_SIZE = 256


@dataclass(frozen=True)
class ContentKind:
    """A scraper sub-path and the body size at or below which it is rejected."""

    name: str
    path: str
    min_size: int


MARKDOWN = ContentKind("markdown", "markdown", MIN_MD_CONTENT_SIZE)
HTML = ContentKind("html", "html", MIN_HTML_CONTENT_SIZE)
LINKS = ContentKind("links", "links", MIN_LINKS_CONTENT_SIZE)
SCREENSHOT = ContentKind("screenshot", "screenshot", MIN_IMG_CONTENT_SIZE)


@dataclass(frozen=True)
class ContentKinds:
    """The set of kinds a browser instance works with."""

    markdown: ContentKind = MARKDOWN
    html: ContentKind = HTML
    links: ContentKind = LINKS
    screenshot: ContentKind = SCREENSHOT

    @classmethod
    def from_settings(cls, settings: Settings) -> ContentKinds:
        return cls(
            markdown=replace(MARKDOWN, min_size=settings.min_md_content_size),
            html=replace(HTML, min_size=settings.min_html_content_size),
            links=replace(LINKS, min_size=settings.min_links_content_size),
            screenshot=replace(SCREENSHOT, min_size=settings.min_img_content_size),
        )
