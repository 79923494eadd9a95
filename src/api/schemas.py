"""Request/response Pydantic models."""

from typing import Literal

from pydantic import BaseModel

from src.browser import BrowserAction


class BrowserRequest(BrowserAction):
    task_id: int | None = None
    subtask_id: int | None = None
    agent_role: str = ""


class BrowserResponse(BaseModel):
    url: str
    action: Literal["markdown", "html", "links"]
    content: str
    screenshot: str | None = None
