"""Fake scraper backend shared by the browser tests."""

from __future__ import annotations

import httpx

from src.browser.kinds import (
    MIN_HTML_CONTENT_SIZE,
    MIN_IMG_CONTENT_SIZE,
    MIN_MD_CONTENT_SIZE,
)

PUBLIC_URL = "http://scraper-pub:8080"
PRIVATE_URL = "http://scraper-prv:8080"

VALID_MD = "A" * (MIN_MD_CONTENT_SIZE + 1)
VALID_HTML = "<p>x</p>" * (MIN_HTML_CONTENT_SIZE // 8 + 1)
VALID_LINKS = '[{"Title":"Example","Link":"https://example.com"}]'
VALID_SCREENSHOT = b"\x89PNG" * (MIN_IMG_CONTENT_SIZE // 4 + 1)


def make_scraper(
    screenshot: str = "ok",
    overrides: dict[str, httpx.Response] | None = None,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Simulate the scraper service.

    *screenshot* controls ``/screenshot``: ``"ok"``, ``"fail"`` or ``"small"``.
    """
    overrides = overrides or {}

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        path = request.url.path
        if path in overrides:
            return overrides[path]
        if path == "/markdown":
            return httpx.Response(200, text=VALID_MD)
        if path == "/html":
            return httpx.Response(200, text=VALID_HTML)
        if path == "/links":
            return httpx.Response(200, text=VALID_LINKS)
        if path == "/screenshot":
            if screenshot == "ok":
                return httpx.Response(200, content=VALID_SCREENSHOT)
            if screenshot == "small":
                return httpx.Response(200, content=b"tiny")
            return httpx.Response(500)
        return httpx.Response(404)

    return httpx.MockTransport(handler)
