"""Service layer — runs browser actions for the API routes."""

from __future__ import annotations

import logging

import httpx

from src.api.schemas import BrowserRequest, BrowserResponse
from src.browser import (
    BrowserTool,
    LoggingActionLog,
    LoggingScreenshotLog,
    build_browser,
)
from src.config import Settings

logger = logging.getLogger(__name__)


async def run_browser_action(
    settings: Settings,
    flow_id: int,
    body: BrowserRequest,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BrowserResponse:
    """Run one browser action for *flow_id* and shape the API response.

    Browser errors propagate so the route can map them to status codes.
    """
    tool = BrowserTool(
        build_browser(settings, flow_id, transport=transport),
        task_id=body.task_id,
        subtask_id=body.subtask_id,
        agent_role=body.agent_role,
        action_log=LoggingActionLog(flow_id),
        screenshots=LoggingScreenshotLog(flow_id),
    )
    extraction = await tool.run(body)
    logger.info(
        "browser action completed",
        extra={
            "flow_id": flow_id,
            "action": body.action,
            "url": body.url,
            "content_length": len(extraction.content),
            "screenshot": extraction.screenshot or "",
        },
    )
    return BrowserResponse(
        url=body.url,
        action=body.action,
        content=extraction.content,
        screenshot=extraction.screenshot,
    )
