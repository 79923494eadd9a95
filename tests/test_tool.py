"""Browser tool dispatch tests."""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from src.browser import (
    BackendRejectedError,
    BrowserAction,
    BrowserTool,
    ConfigurationError,
    InvalidActionError,
)
from tests.fakes import VALID_HTML, VALID_MD, make_scraper


def _tool(browser, **kwargs) -> BrowserTool:
    return BrowserTool(browser, task_id=10, subtask_id=20, agent_role="pentester", **kwargs)


def test_parse_action_from_json():
    action = BrowserTool.parse_action('{"url": "https://example.com", "action": "html"}')
    assert action == BrowserAction(url="https://example.com", action="html")


def test_parse_action_defaults_to_markdown():
    assert BrowserTool.parse_action({"url": "https://example.com"}).action == "markdown"


@pytest.mark.parametrize(
    "args",
    [
        {"url": "https://example.com", "action": "pdf"},
        {"action": "html"},
        {"url": ""},
        "not json",
    ],
)
def test_parse_action_invalid(args):
    with pytest.raises(InvalidActionError):
        BrowserTool.parse_action(args)


@pytest.mark.asyncio
@pytest.mark.parametrize(("action", "expected"), [("markdown", VALID_MD), ("html", VALID_HTML)])
async def test_handle_dispatches_by_action(browser_factory, action, expected):
    tool = _tool(browser_factory(make_scraper("fail")))
    result = await tool.handle({"url": "https://example.com", "action": action})
    assert result == expected


@pytest.mark.asyncio
async def test_handle_links(browser_factory):
    tool = _tool(browser_factory(make_scraper("fail")))
    result = await tool.handle(json.dumps({"url": "https://example.com", "action": "links"}))
    assert "[Example](https://example.com)" in result


@pytest.mark.asyncio
async def test_sinks_notified_on_success(browser_factory):
    action_log = AsyncMock()
    screenshots = AsyncMock()
    tool = _tool(browser_factory(make_scraper("ok")), action_log=action_log, screenshots=screenshots)

    extraction = await tool.run(BrowserAction(url="https://example.com", action="markdown"))

    screenshots.put_screenshot.assert_awaited_once_with(
        extraction.screenshot, "https://example.com", 10, 20
    )
    action_log.put_log.assert_awaited_once()
    agent_role, engine, query, result, task_id, subtask_id = action_log.put_log.await_args.args
    assert (agent_role, engine, task_id, subtask_id) == ("pentester", "browser", 10, 20)
    assert json.loads(query) == {"url": "https://example.com", "action": "markdown"}
    assert result == VALID_MD


@pytest.mark.asyncio
async def test_no_screenshot_report_when_degraded(browser_factory):
    screenshots = AsyncMock()
    tool = _tool(browser_factory(make_scraper("fail")), screenshots=screenshots)
    await tool.handle({"url": "https://example.com"})
    screenshots.put_screenshot.assert_not_awaited()


@pytest.mark.asyncio
async def test_failure_skips_log(browser_factory):
    action_log = AsyncMock()
    transport = make_scraper(overrides={"/markdown": httpx.Response(404)})
    tool = _tool(browser_factory(transport), action_log=action_log)
    with pytest.raises(BackendRejectedError):
        await tool.handle({"url": "https://example.com"})
    action_log.put_log.assert_not_awaited()


@pytest.mark.asyncio
async def test_unavailable_tool(browser_factory):
    tool = _tool(browser_factory(make_scraper(), public_url=""))
    assert not tool.is_available()
    with pytest.raises(ConfigurationError):
        await tool.handle({"url": "https://example.com"})
