#!/usr/bin/env python3
"""
Fail if the request layer or endpoint catalog imports MCP/server modules.
Checks client.py, config.py, models.py, observability.py and api/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = REPO_ROOT / "src" / "edgee_mcp"

CORE_PATHS = (
    PACKAGE_DIR / "client.py",
    PACKAGE_DIR / "config.py",
    PACKAGE_DIR / "models.py",
    PACKAGE_DIR / "observability.py",
    PACKAGE_DIR / "api",
)

FORBIDDEN_PREFIXES = (
    "starlette",
    "uvicorn",
    "mcp",
    "fastmcp",
    "edgee_mcp.registry",
    "edgee_mcp.server",
    "edgee_mcp.tools",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if node.level == 0 and mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
            elif node.level and mod.split(".")[0] in {"registry", "server", "tools"}:
                errors.append(f"{path}: forbidden import '.{mod}'")
    return errors


def iter_core_files():
    for path in CORE_PATHS:
        if path.is_dir():
            yield from sorted(path.rglob("*.py"))
        elif path.exists():
            yield path


def main() -> int:
    violations: list[str] = []
    for py_file in iter_core_files():
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
