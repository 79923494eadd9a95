"""Agent-facing browser tool: validates an action and dispatches it."""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from .browser import Browser, Extraction
from .errors import InvalidActionError
from .providers import ActionLogProvider, ScreenshotProvider

logger = logging.getLogger(__name__)

BROWSER_ENGINE = "browser"


class BrowserAction(BaseModel):
    url: str = Field(min_length=1)
    action: Literal["markdown", "html", "links"] = "markdown"
    message: str = ""


class BrowserTool:
    """Runs :class:`BrowserAction` requests for one flow and reports them."""

    def __init__(
        self,
        browser: Browser,
        *,
        task_id: int | None = None,
        subtask_id: int | None = None,
        agent_role: str = "",
        action_log: ActionLogProvider | None = None,
        screenshots: ScreenshotProvider | None = None,
    ) -> None:
        self._browser = browser
        self._task_id = task_id
        self._subtask_id = subtask_id
        self._agent_role = agent_role
        self._action_log = action_log
        self._screenshots = screenshots

    def is_available(self) -> bool:
        return self._browser.is_available()

    @staticmethod
    def parse_action(args: dict[str, Any] | str | bytes) -> BrowserAction:
        try:
            if isinstance(args, (str, bytes)):
                return BrowserAction.model_validate_json(args)
            return BrowserAction.model_validate(args)
        except ValidationError as exc:
            raise InvalidActionError(f"invalid browser action arguments: {exc}") from exc

    async def run(self, action: BrowserAction) -> Extraction:
        """Execute *action* and notify the screenshot and log sinks."""
        logger.info(
            "browser action started",
            extra={"flow_id": self._browser.flow_id, "action": action.action, "url": action.url},
        )
        if action.action == "html":
            extraction = await self._browser.content_html(action.url)
        elif action.action == "links":
            extraction = await self._browser.links(action.url)
        else:
            extraction = await self._browser.content_md(action.url)

        if extraction.screenshot and self._screenshots is not None:
            await self._screenshots.put_screenshot(
                extraction.screenshot, action.url, self._task_id, self._subtask_id
            )
        if self._action_log is not None:
            await self._action_log.put_log(
                self._agent_role,
                BROWSER_ENGINE,
                json.dumps({"url": action.url, "action": action.action}),
                extraction.content,
                self._task_id,
                self._subtask_id,
            )
        return extraction

    async def handle(self, args: dict[str, Any] | str | bytes) -> str:
        """Parse raw tool arguments, run the action and return its content."""
        action = self.parse_action(args)
        extraction = await self.run(action)
        return extraction.content
