"""Extraction orchestrator: endpoint routing, content fetch, screenshot."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import httpx

from .endpoints import ScraperEndpoints
from .errors import InvalidContentError
from .fetcher import DEFAULT_TIMEOUT, fetch_content, fetch_screenshot
from .kinds import ContentKind, ContentKinds
from .storage import ScreenshotStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extraction:
    """Primary content plus the advisory screenshot file name."""

    content: str
    screenshot: str | None = None


def format_links(url: str, raw: str) -> str:
    """Render the scraper's ``[{"Title", "Link"}]`` payload as markdown."""
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidContentError(f"links payload is not valid JSON: {exc}") from exc
    if not isinstance(items, list):
        raise InvalidContentError("links payload is not a JSON array")

    lines = [f"Links list from URL '{url}'", ""]
    for item in items:
        if not isinstance(item, dict):
            continue
        link = item.get("Link")
        title = item.get("Title")
        if not isinstance(link, (str, type(None))) or not isinstance(title, (str, type(None))):
            raise InvalidContentError("links payload entries must have string Title and Link")
        if not link:
            continue
        title = (title or "").strip() or "UNTITLED"
        lines.append(f"- [{title}]({link})")
    return "\n".join(lines)


class Browser:
    """Fetches page content and screenshots for a single flow."""

    def __init__(
        self,
        *,
        flow_id: int,
        data_dir: str | Path,
        endpoints: ScraperEndpoints,
        kinds: ContentKinds | None = None,
        proxy_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._flow_id = flow_id
        self._endpoints = endpoints
        self._kinds = kinds or ContentKinds()
        self._store = ScreenshotStore(data_dir, flow_id)
        self._proxy_url = proxy_url
        self._timeout = timeout
        self._transport = transport

    @property
    def flow_id(self) -> int:
        return self._flow_id

    @property
    def store(self) -> ScreenshotStore:
        return self._store

    def is_available(self) -> bool:
        return self._endpoints.is_available

    async def content_md(self, url: str) -> Extraction:
        return await self._extract(url, self._kinds.markdown)

    async def content_html(self, url: str) -> Extraction:
        return await self._extract(url, self._kinds.html)

    async def links(self, url: str) -> Extraction:
        return await self._extract(url, self._kinds.links, render=format_links)

    async def _extract(
        self,
        url: str,
        kind: ContentKind,
        render: Callable[[str, str], str] | None = None,
    ) -> Extraction:
        base_url = self._endpoints.resolve(url)
        content = await fetch_content(
            base_url,
            url,
            kind,
            timeout=self._timeout,
            proxy_url=self._proxy_url,
            transport=self._transport,
        )
        if render is not None:
            content = render(url, content)
        screenshot = await fetch_screenshot(
            base_url,
            url,
            self._store,
            kind=self._kinds.screenshot,
            timeout=self._timeout,
            proxy_url=self._proxy_url,
            transport=self._transport,
        )
        logger.debug(
            "extraction complete",
            extra={
                "flow_id": self._flow_id,
                "url": url,
                "kind": kind.name,
                "content_length": len(content),
                "screenshot": screenshot or "",
            },
        )
        return Extraction(content=content, screenshot=screenshot)
