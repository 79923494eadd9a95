"""Fixtures — flow-scoped browser against a fake scraper."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from src.browser import Browser, ScraperEndpoints
from tests.fakes import PUBLIC_URL


@pytest.fixture
def browser_factory(tmp_path) -> Callable[..., Browser]:
    """Build a flow-1 browser against a fake public-only scraper."""

    def _make(
        transport: httpx.AsyncBaseTransport,
        private_url: str = "",
        public_url: str = PUBLIC_URL,
        **kwargs,
    ) -> Browser:
        return Browser(
            flow_id=1,
            data_dir=kwargs.pop("data_dir", tmp_path),
            endpoints=ScraperEndpoints(private_url=private_url, public_url=public_url),
            transport=transport,
            **kwargs,
        )

    return _make
