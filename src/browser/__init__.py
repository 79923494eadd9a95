"""Browser tool: routes page extraction to the private or public scraper."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .browser import Browser, Extraction, format_links
from .endpoints import ScraperEndpoints, resolve_endpoint
from .errors import (
    BackendRejectedError,
    BackendUnreachableError,
    BrowserError,
    ConfigurationError,
    IncompleteContentError,
    InvalidActionError,
    InvalidContentError,
    MalformedTargetError,
)
from .fetcher import fetch_content, fetch_screenshot
from .hosts import HostClass, classify_host, classify_hostname
from .kinds import ContentKind, ContentKinds
from .providers import (
    ActionLogProvider,
    LoggingActionLog,
    LoggingScreenshotLog,
    ScreenshotProvider,
)
from .storage import ScreenshotStore
from .tool import BrowserAction, BrowserTool

if TYPE_CHECKING:
    import httpx

    from src.config import Settings

__all__ = [
    "ActionLogProvider",
    "BackendRejectedError",
    "BackendUnreachableError",
    "Browser",
    "BrowserAction",
    "BrowserError",
    "BrowserTool",
    "ConfigurationError",
    "ContentKind",
    "ContentKinds",
    "Extraction",
    "HostClass",
    "IncompleteContentError",
    "InvalidActionError",
    "InvalidContentError",
    "LoggingActionLog",
    "LoggingScreenshotLog",
    "MalformedTargetError",
    "ScraperEndpoints",
    "ScreenshotProvider",
    "ScreenshotStore",
    "build_browser",
    "classify_host",
    "classify_hostname",
    "fetch_content",
    "fetch_screenshot",
    "format_links",
    "resolve_endpoint",
]


def build_browser(
    settings: Settings,
    flow_id: int,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Browser:
    """Build a flow-scoped browser from the configured scraper endpoints."""
    return Browser(
        flow_id=flow_id,
        data_dir=settings.data_dir,
        endpoints=ScraperEndpoints.from_settings(settings),
        kinds=ContentKinds.from_settings(settings),
        proxy_url=settings.proxy_url,
        timeout=settings.scraper_timeout_seconds,
        transport=transport,
    )
