"""
MCP tool modules for Edgee.

Every public coroutine in a submodule whose first parameter is ``client`` is
discovered by :mod:`edgee_mcp.registry` and exposed as ``edgee-<camelName>``.
"""
