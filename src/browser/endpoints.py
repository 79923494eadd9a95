"""Scraper endpoint pair and per-target endpoint selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlparse

from .errors import ConfigurationError, MalformedTargetError
from .hosts import HostClass, classify_hostname

if TYPE_CHECKING:
    from src.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScraperEndpoints:
    """Base URLs of the private-network and public-internet scrapers."""

    private_url: str = ""
    public_url: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> ScraperEndpoints:
        return cls(
            private_url=settings.scraper_private_url,
            public_url=settings.scraper_public_url,
        )

    @property
    def is_available(self) -> bool:
        return bool(self.private_url or self.public_url)

    def resolve(self, target_url: str) -> str:
        return resolve_endpoint(target_url, self.private_url, self.public_url)


def _base_of(endpoint: str) -> str:
    parsed = urlparse(endpoint)
    if not parsed.scheme or not parsed.netloc:
        raise ConfigurationError(f"invalid scraper endpoint '{endpoint}'")
    return f"{parsed.scheme}://{parsed.netloc}"


def resolve_endpoint(target_url: str, private_url: str, public_url: str) -> str:
    """Pick the scraper base URL (``scheme://host[:port]``) for *target_url*.

    Private targets go to the private scraper and public targets to the
    public one. When only one scraper is configured it serves every target.
    Raises :class:`ConfigurationError` when neither is configured and
    :class:`MalformedTargetError` when the target has no scheme or host.
    """
    if not private_url and not public_url:
        raise ConfigurationError("no scraper endpoint is configured")

    try:
        parsed = urlparse(target_url)
        hostname = parsed.hostname
    except ValueError as exc:
        raise MalformedTargetError(target_url, str(exc)) from exc
    if not parsed.scheme or not hostname:
        raise MalformedTargetError(target_url)

    host_class = classify_hostname(hostname)
    if host_class is HostClass.PRIVATE:
        chosen = private_url or public_url
    else:
        chosen = public_url or private_url

    base = _base_of(chosen)
    logger.debug(
        "scraper endpoint resolved",
        extra={"target_host": hostname, "host_class": host_class.value, "endpoint": base},
    )
    return base
