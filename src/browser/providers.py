"""Collaborators notified by the tool layer after a browser action."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ActionLogProvider(Protocol):
    """Sink for completed browser actions."""

    async def put_log(
        self,
        agent_role: str,
        engine: str,
        query: str,
        result: str,
        task_id: int | None,
        subtask_id: int | None,
    ) -> None: ...


class ScreenshotProvider(Protocol):
    """Sink for screenshots captured during a flow."""

    async def put_screenshot(
        self,
        name: str,
        url: str,
        task_id: int | None,
        subtask_id: int | None,
    ) -> None: ...


class LoggingActionLog:
    """Records browser actions as structured log entries."""

    def __init__(self, flow_id: int) -> None:
        self._flow_id = flow_id

    async def put_log(
        self,
        agent_role: str,
        engine: str,
        query: str,
        result: str,
        task_id: int | None,
        subtask_id: int | None,
    ) -> None:
        logger.info(
            "browser action logged",
            extra={
                "flow_id": self._flow_id,
                "agent_role": agent_role,
                "engine": engine,
                "query": query[:200],
                "result_length": len(result),
                "task_id": task_id,
                "subtask_id": subtask_id,
            },
        )


class LoggingScreenshotLog:
    """Records captured screenshots as structured log entries."""

    def __init__(self, flow_id: int) -> None:
        self._flow_id = flow_id

    async def put_screenshot(
        self,
        name: str,
        url: str,
        task_id: int | None,
        subtask_id: int | None,
    ) -> None:
        logger.info(
            "screenshot recorded",
            extra={
                "flow_id": self._flow_id,
                "screenshot": name,
                "url": url,
                "task_id": task_id,
                "subtask_id": subtask_id,
            },
        )
