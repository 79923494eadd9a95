"""Single-shot requests against the scraper backend."""

from __future__ import annotations

import asyncio
import logging

import httpx

from .errors import (
    BackendRejectedError,
    BackendUnreachableError,
    IncompleteContentError,
)
from .kinds import SCREENSHOT, ContentKind
from .storage import ScreenshotStore

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 65.0


def _new_client(
    timeout: float,
    proxy_url: str,
    transport: httpx.AsyncBaseTransport | None,
) -> httpx.AsyncClient:
    # A fresh client per request; proxy settings never leak between calls.
    kwargs: dict = {"timeout": timeout, "follow_redirects": True}
    if proxy_url:
        kwargs["proxy"] = proxy_url
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


async def _request(
    base_url: str,
    target_url: str,
    kind: ContentKind,
    *,
    timeout: float,
    proxy_url: str,
    transport: httpx.AsyncBaseTransport | None,
) -> bytes:
    endpoint = f"{base_url.rstrip('/')}/{kind.path}"
    try:
        async with _new_client(timeout, proxy_url, transport) as client:
            resp = await client.get(endpoint, params={"url": target_url})
    except httpx.HTTPError as exc:
        raise BackendUnreachableError(endpoint, exc) from exc

    if not resp.is_success:
        raise BackendRejectedError(endpoint, resp.status_code)

    body = resp.content
    if len(body) <= kind.min_size:
        raise IncompleteContentError(kind.name, len(body), kind.min_size)

    logger.debug(
        "scraper response received",
        extra={"kind": kind.name, "endpoint": endpoint, "size": len(body)},
    )
    return body


async def fetch_content(
    base_url: str,
    target_url: str,
    kind: ContentKind,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    proxy_url: str = "",
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Fetch *kind* content of *target_url* from the scraper at *base_url*.

    Raises :class:`BackendUnreachableError` on transport failure,
    :class:`BackendRejectedError` on a non-2xx status and
    :class:`IncompleteContentError` when the body is not larger than
    ``kind.min_size`` bytes.
    """
    body = await _request(
        base_url,
        target_url,
        kind,
        timeout=timeout,
        proxy_url=proxy_url,
        transport=transport,
    )
    return body.decode("utf-8", errors="replace")


async def fetch_screenshot(
    base_url: str,
    target_url: str,
    store: ScreenshotStore,
    *,
    kind: ContentKind = SCREENSHOT,
    timeout: float = DEFAULT_TIMEOUT,
    proxy_url: str = "",
    transport: httpx.AsyncBaseTransport | None = None,
) -> str | None:
    """Capture a screenshot of *target_url* and store it for the flow.

    Returns the generated file name, or ``None`` if the screenshot could not
    be fetched or written. Never raises for those failures.
    """
    try:
        data = await _request(
            base_url,
            target_url,
            kind,
            timeout=timeout,
            proxy_url=proxy_url,
            transport=transport,
        )
    except (BackendUnreachableError, BackendRejectedError, IncompleteContentError) as exc:
        logger.warning(
            "screenshot unavailable",
            extra={"url": target_url, "flow_id": store.flow_id, "reason": str(exc)},
        )
        return None

    try:
        name = await asyncio.to_thread(store.save, data)
    except OSError:
        logger.warning(
            "screenshot write failed",
            extra={"url": target_url, "flow_id": store.flow_id},
            exc_info=True,
        )
        return None

    logger.debug(
        "screenshot saved",
        extra={"url": target_url, "flow_id": store.flow_id, "screenshot": name, "size": len(data)},
    )
    return name
