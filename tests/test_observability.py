import logging

import httpx
import pytest
import respx

from edgee_mcp.client import EdgeeApiError, EdgeeClient
from edgee_mcp.logging import LogfmtFormatter
from edgee_mcp.observability import log_event

BASE = "https://api.edgee.app"


def test_log_event_drops_reserved_keys(caplog):
    caplog.set_level(logging.INFO, logger="edgee_mcp.observability")

    log_event("custom", tool="edgee-getMe", name="ignored", lineno=-1)

    record = next(r for r in caplog.records if r.getMessage() == "custom")
    assert record.tool == "edgee-getMe"
    assert record.name == "edgee_mcp.observability"
    assert record.lineno != -1


def test_logfmt_formatter_quotes_values():
    record = logging.LogRecord(
        "edgee_mcp.client", logging.WARNING, __file__, 1, "api_call_failed", None, None
    )
    record.tool = "get_me"
    record.status = 0
    record.error = "connection refused"

    line = LogfmtFormatter().format(record)

    assert line == (
        "level=warning logger=edgee_mcp.client event=api_call_failed "
        'tool=get_me status=0 error="connection refused"'
    )


@pytest.mark.asyncio
@respx.mock
async def test_client_logs_success(caplog):
    caplog.set_level(logging.DEBUG, logger="edgee_mcp.client")
    respx.get(f"{BASE}/v1/users/me").mock(
        return_value=httpx.Response(200, json={"id": "u1"})
    )
    client = EdgeeClient(token="tok")
    try:
        await client.get("/v1/users/me", tool="get_me")
    finally:
        await client.aclose()

    record = next(r for r in caplog.records if r.getMessage() == "api_call")
    assert record.levelno == logging.DEBUG
    assert record.tool == "get_me"
    assert record.method == "GET"
    assert record.status == 200
    assert record.endpoint == "/v1/users/me"
    assert record.duration_ms >= 0


@pytest.mark.asyncio
@respx.mock
async def test_client_logs_transport_failure(caplog):
    caplog.set_level(logging.INFO, logger="edgee_mcp.client")
    respx.get(f"{BASE}/v1/projects").mock(side_effect=httpx.ConnectTimeout("boom"))
    client = EdgeeClient(token="tok")
    with pytest.raises(EdgeeApiError):
        await client.get("/v1/projects", tool="list_projects")
    await client.aclose()

    record = next(r for r in caplog.records if r.getMessage() == "api_call_failed")
    assert record.levelno == logging.WARNING
    assert record.tool == "list_projects"
    assert record.status == 0
    assert record.error_type == "ConnectTimeout"
    assert record.endpoint == "/v1/projects"


@pytest.mark.asyncio
@respx.mock
async def test_client_logs_api_error_type(caplog):
    caplog.set_level(logging.INFO, logger="edgee_mcp.client")
    respx.get(f"{BASE}/v1/projects/p1").mock(
        return_value=httpx.Response(
            403, json={"error": {"type": "forbidden_error", "message": "No access"}}
        )
    )
    client = EdgeeClient(token="tok")
    with pytest.raises(EdgeeApiError):
        await client.get("/v1/projects/p1")
    await client.aclose()

    record = next(r for r in caplog.records if r.getMessage() == "api_call_failed")
    assert record.status == 403
    assert record.error_type == "forbidden_error"
    assert record.error == "HTTP error! status: 403"


def test_log_event_leaves_none_fields_off(caplog):
    caplog.set_level(logging.INFO, logger="edgee_mcp.observability")

    log_event("tool_failed", tool="edgee-getMe", status=None, message="x")

    record = next(r for r in caplog.records if r.getMessage() == "tool_failed")
    assert record.tool == "edgee-getMe"
    assert not hasattr(record, "status")
