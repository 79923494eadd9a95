"""POST /flows/{id}/browser and GET /flows/{id}/screenshots/{name} handlers."""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse

from src.api.schemas import BrowserRequest, BrowserResponse
from src.api.service import run_browser_action
from src.auth.dependencies import require_api_key
from src.browser import (
    BackendRejectedError,
    BackendUnreachableError,
    BrowserError,
    ConfigurationError,
    IncompleteContentError,
    InvalidContentError,
    MalformedTargetError,
    ScreenshotStore,
)
from src.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])

_STATUS_BY_ERROR: tuple[tuple[type[BrowserError], int], ...] = (
    (ConfigurationError, 503),
    (MalformedTargetError, 422),
    (InvalidContentError, 502),
    (BackendUnreachableError, 502),
    (BackendRejectedError, 502),
    (IncompleteContentError, 502),
)


def _status_for(exc: BrowserError) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return 500


def _get_transport(request: Request) -> httpx.AsyncBaseTransport | None:
    return getattr(request.app.state, "scraper_transport", None)


@router.post("/flows/{flow_id}/browser", response_model=BrowserResponse)
async def browse(
    flow_id: int,
    body: BrowserRequest,
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(_get_transport),
):
    try:
        return await run_browser_action(settings, flow_id, body, transport=transport)
    except BrowserError as exc:
        code = _status_for(exc)
        logger.warning(
            "browser action failed",
            extra={"flow_id": flow_id, "url": body.url, "action": body.action, "status": code},
            exc_info=True,
        )
        raise HTTPException(status_code=code, detail=str(exc)) from exc


@router.get("/flows/{flow_id}/screenshots/{name}")
async def get_screenshot(
    flow_id: int,
    name: str,
    settings: Settings = Depends(get_settings),
):
    path = ScreenshotStore(settings.data_dir, flow_id).find(name)
    if path is None:
        raise HTTPException(status_code=404, detail="Screenshot not found")
    return FileResponse(path, media_type="image/png")
