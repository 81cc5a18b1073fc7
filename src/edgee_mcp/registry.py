from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType
from typing import Callable, Iterable, List, Set, get_type_hints

from mcp.server.fastmcp.exceptions import ToolError

from .client import EdgeeClient, EdgeeClientError
from .formatters import format_error
from .observability import log_event

log = logging.getLogger("edgee_mcp.registry")

TOOL_PREFIX = "edgee-"


# --- Discovery helpers ----------------------------------------------------- #


def discover_tool_modules(package_name: str = "edgee_mcp.tools") -> List[ModuleType]:
    """Import all modules under the given tools package, skipping failures."""
    modules: List[ModuleType] = []
    base_pkg = importlib.import_module(package_name)

    for finder in pkgutil.iter_modules(base_pkg.__path__, base_pkg.__name__ + "."):
        name = finder.name
        try:
            module = importlib.import_module(name)
            modules.append(module)
        except Exception as exc:  # pragma: no cover - logged, not fatal
            log.error("Failed importing tool module %s: %s", name, exc)
            continue

    return modules


def iter_tool_functions(module: ModuleType) -> Iterable[Callable]:
    """Yield coroutine functions defined in the module whose first param is client."""
    for _, func in inspect.getmembers(module, inspect.iscoroutinefunction):
        if func.__name__.startswith("_"):
            continue
        if func.__module__ != module.__name__:
            # Skip imported functions
            continue

        params = list(inspect.signature(func).parameters.values())
        if not params or params[0].name != "client":
            log.debug(
                "Skipping %s.%s: first parameter must be 'client'",
                module.__name__,
                func.__name__,
            )
            continue

        yield func


def tool_name(func: Callable) -> str:
    """edgee- prefix plus lowerCamelCase: get_component_by_uuid -> edgee-getComponentByUuid."""
    head, *rest = func.__name__.split("_")
    return TOOL_PREFIX + head + "".join(part.capitalize() for part in rest)


# --- Wrapping / registration ---------------------------------------------- #


def _wrap_tool(
    func: Callable, name: str, client_provider: Callable[[], EdgeeClient]
) -> Callable:
    """Return a wrapper that injects client, hides it, and maps client errors."""
    original_sig = inspect.signature(func)
    type_hints = get_type_hints(func)

    new_params = []
    for i, (param_name, param) in enumerate(original_sig.parameters.items()):
        if i == 0 and param_name == "client":
            continue  # drop injected client
        ann = type_hints.get(param_name, param.annotation)
        new_params.append(param.replace(annotation=ann))

    return_ann = type_hints.get("return", original_sig.return_annotation)
    new_sig = inspect.Signature(parameters=new_params, return_annotation=return_ann)

    async def wrapped(*args, **kwargs):
        client = client_provider()
        try:
            return await func(client, *args, **kwargs)
        except EdgeeClientError as exc:
            log_event(
                "tool_failed",
                logger=log,
                level=logging.WARNING,
                tool=name,
                status=getattr(exc, "status", None),
                error_type=type(exc).__name__,
            )
            raise ToolError(format_error(exc)) from exc

    wrapped.__name__ = func.__name__
    wrapped.__doc__ = func.__doc__
    wrapped.__module__ = func.__module__
    wrapped.__signature__ = new_sig  # type: ignore[attr-defined]
    return wrapped


def register_discovered_tools(
    app,
    client_provider: Callable[[], EdgeeClient] | EdgeeClient,
    modules: List[ModuleType] | None = None,
) -> List[str]:
    """Register discovered tools on an app that exposes a .tool decorator."""
    if isinstance(client_provider, EdgeeClient):
        _client = client_provider

        def client_provider():
            return _client

    if not hasattr(app, "tool"):
        raise TypeError("app must expose a 'tool' decorator")

    modules = modules or discover_tool_modules()
    seen_names: Set[str] = set()
    registered: List[str] = []

    for module in modules:
        for func in iter_tool_functions(module):
            name = tool_name(func)
            if name in seen_names:
                raise ValueError(f"Duplicate tool name detected: {name}")

            wrapped = _wrap_tool(func, name, client_provider)
            description = inspect.getdoc(func) or None
            app.tool(name=name, description=description)(wrapped)
            seen_names.add(name)
            registered.append(name)
            log.debug("Registered tool: %s (%s)", name, module.__name__)

    log.info("Registered %d tools", len(registered))
    return registered


__all__ = [
    "TOOL_PREFIX",
    "discover_tool_modules",
    "iter_tool_functions",
    "register_discovered_tools",
    "tool_name",
]
