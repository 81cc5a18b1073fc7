import inspect
import logging
from types import ModuleType

import pytest
import respx
from httpx import Response
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from edgee_mcp.client import EdgeeApiError, EdgeeClient
from edgee_mcp.registry import (
    discover_tool_modules,
    register_discovered_tools,
    tool_name,
)
from edgee_mcp.server import create_app

BASE = "https://api.edgee.app"


def _make_module(name: str, code: str) -> ModuleType:
    module = ModuleType(name)
    exec(code, module.__dict__)
    return module


def _recording_app():
    app = FastMCP("test")
    registered = []

    # monkeypatch tool to record registrations
    def record_tool(name, description=None):
        def decorator(fn):
            registered.append((name, description, fn))
            return fn

        return decorator

    app.tool = record_tool  # type: ignore[attr-defined]
    return app, registered


def test_tool_name_is_prefixed_camel_case():
    async def get_component_by_uuid(client):
        return ""

    async def get_me(client):
        return ""

    assert tool_name(get_component_by_uuid) == "edgee-getComponentByUuid"
    assert tool_name(get_me) == "edgee-getMe"


@pytest.mark.asyncio
async def test_register_discovered_tools_registers_valid_tools_only():
    code = '''
async def list_things(client, *, foo: int = 1):
    """List things."""
    return (client.base_url, foo)

async def _private(client):
    return None

async def wrong_first(arg1, client):
    return None

def sync_func(client):
    return None
'''
    mod = _make_module("fake_mod", code)
    app, registered = _recording_app()
    client = EdgeeClient(token="tok", base_url="https://mock.example.com")

    names = register_discovered_tools(app, client, modules=[mod])

    assert names == ["edgee-listThings"]
    name, description, wrapped = registered[0]
    assert name == "edgee-listThings"
    assert description == "List things."

    # wrapper signature should not expose client
    sig = inspect.signature(wrapped)
    assert "client" not in sig.parameters
    assert sig.parameters["foo"].annotation is int

    # call wrapper to ensure client injection works
    assert await wrapped(foo=5) == ("https://mock.example.com", 5)
    await client.aclose()


@pytest.mark.asyncio
async def test_wrapper_maps_client_errors_to_tool_error(caplog):
    async def get_thing(client, id: str) -> str:
        raise EdgeeApiError(
            "HTTP error! status: 404",
            404,
            {"error": {"type": "not_found_error", "message": "Thing not found"}},
        )

    mod = _make_module("errors_mod", "")
    get_thing.__module__ = "errors_mod"
    mod.get_thing = get_thing

    app, registered = _recording_app()
    register_discovered_tools(app, lambda: None, modules=[mod])
    wrapped = registered[0][2]

    with caplog.at_level(logging.WARNING, logger="edgee_mcp.registry"):
        with pytest.raises(ToolError) as exc:
            await wrapped(id="t1")

    assert str(exc.value) == (
        "HTTP error! status: 404\nType: not_found_error\nMessage: Thing not found"
    )
    record = next(r for r in caplog.records if r.getMessage() == "tool_failed")
    assert record.tool == "edgee-getThing"
    assert record.status == 404


@pytest.mark.asyncio
async def test_wrapper_lets_other_errors_through():
    async def broken(client) -> str:
        raise RuntimeError("bug")

    mod = _make_module("broken_mod", "")
    broken.__module__ = "broken_mod"
    mod.broken = broken

    app, registered = _recording_app()
    register_discovered_tools(app, lambda: None, modules=[mod])

    with pytest.raises(RuntimeError):
        await registered[0][2]()


def test_register_discovered_tools_duplicate_names_raise():
    mod1 = _make_module("mod1", "async def tool_fn(client): return None")
    mod2 = _make_module("mod2", "async def tool_fn(client): return None")

    app = FastMCP("test")

    with pytest.raises(ValueError):
        register_discovered_tools(app, lambda: None, modules=[mod1, mod2])


def test_discover_tool_modules_skips_import_failures(monkeypatch, caplog):
    import importlib
    import pkgutil

    class Info:
        def __init__(self, name):
            self.name = name

    def fake_iter_modules(path, prefix):
        return [
            Info(prefix + "good"),
            Info(prefix + "bad"),
        ]

    good_mod = _make_module(
        "edgee_mcp.tools.good", "async def tool_fn(client): return None"
    )

    real_import_module = importlib.import_module

    def fake_import_module(name, *args, **kwargs):
        if name == "edgee_mcp.tools.bad":
            raise ImportError("boom")
        if name == "edgee_mcp.tools.good":
            return good_mod
        return real_import_module(name, *args, **kwargs)

    monkeypatch.setattr(pkgutil, "iter_modules", fake_iter_modules)
    monkeypatch.setattr(importlib, "import_module", fake_import_module)

    with caplog.at_level("ERROR"):
        modules = discover_tool_modules()

    assert [m.__name__ for m in modules] == ["edgee_mcp.tools.good"]
    assert any("Failed importing tool module" in rec.message for rec in caplog.records)


@pytest.mark.asyncio
async def test_create_app_exposes_full_tool_surface():
    client = EdgeeClient(token="tok")
    app = create_app(client)

    tools = {tool.name: tool for tool in await app.list_tools()}

    assert len(tools) == 55
    for expected in (
        "edgee-listOrganizations",
        "edgee-getMyOrganization",
        "edgee-updateProjectProxySettings",
        "edgee-getOutgoingDataCollectionEvents",
        "edgee-createComponentVersion",
        "edgee-createComponentVersionBySlug",
        "edgee-getUploadPresignedUrl",
    ):
        assert expected in tools
    schema = tools["edgee-getProject"].inputSchema
    assert "client" not in schema["properties"]
    assert schema["required"] == ["id"]
    await client.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_call_tool_failure_surfaces_api_error():
    respx.get(f"{BASE}/v1/organizations/missing").mock(
        return_value=Response(
            404, json={"error": {"type": "not_found_error", "message": "Not found"}}
        )
    )
    client = EdgeeClient(token="tok")
    app = create_app(client)

    with pytest.raises(ToolError) as exc:
        await app.call_tool("edgee-getOrganization", {"id": "missing"})

    assert "HTTP error! status: 404" in str(exc.value)
    assert "Type: not_found_error" in str(exc.value)
    await client.aclose()
