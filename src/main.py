"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from src.api.routes import router
from src.browser import ScraperEndpoints
from src.config import Settings, get_settings
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Logging first so everything below is emitted as JSON
    setup_logging(settings.log_level)
    logger.info("starting browser service")

    if not ScraperEndpoints.from_settings(settings).is_available:
        logger.warning("no scraper endpoint configured, browser actions will fail")

    app.state.scraper_transport = None

    logger.info(
        "browser service ready",
        extra={
            "scraper_private_url": settings.scraper_private_url,
            "scraper_public_url": settings.scraper_public_url,
            "proxy_enabled": bool(settings.proxy_url),
            "data_dir": settings.data_dir,
        },
    )

    yield

    logger.info("shutting down browser service")


app = FastAPI(title="Browser Service", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    available = ScraperEndpoints.from_settings(settings).is_available
    return {"status": "ok", "browser_available": available}
