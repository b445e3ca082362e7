# tools package for MCP server tools
# Modules in this package expose `get_tools(api) -> dict[str, dict]` mapping a tool name to
# {"func": async callable, "title": str, "description": str}; tools.registry collects them.
__all__ = []
