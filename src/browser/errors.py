"""Exception hierarchy for the browser extraction pipeline."""

from __future__ import annotations


class BrowserError(Exception):
    """Base class for failures that abort a browser operation."""


class ConfigurationError(BrowserError):
    """Neither the private nor the public scraper endpoint is configured."""


class MalformedTargetError(BrowserError):
    """The requested target URL cannot be parsed into scheme and host."""

    def __init__(self, url: str, reason: str = "missing scheme or host") -> None:
        super().__init__(f"failed to parse url '{url}': {reason}")
        self.url = url


class BackendUnreachableError(BrowserError):
    """Transport-level failure reaching a scraper backend."""

    def __init__(self, endpoint: str, cause: Exception) -> None:
        super().__init__(f"failed to send request to {endpoint}: {cause!r}")
        self.endpoint = endpoint


class BackendRejectedError(BrowserError):
    """Scraper backend answered with a non-2xx status."""

    def __init__(self, endpoint: str, status_code: int) -> None:
        super().__init__(
            f"unexpected status code {status_code} from {endpoint}"
        )
        self.endpoint = endpoint
        self.status_code = status_code


class IncompleteContentError(BrowserError):
    """Response body is at or below the minimum size for its content kind."""

    def __init__(self, kind: str, size: int, min_size: int) -> None:
        super().__init__(
            f"{kind} content is too small ({size} bytes), "
            f"expected more than {min_size} bytes"
        )
        self.kind = kind
        self.size = size
        self.min_size = min_size


class InvalidContentError(BrowserError):
    """Response body does not have the shape expected for its content kind."""


class InvalidActionError(BrowserError):
    """Tool arguments do not describe a valid browser action."""
