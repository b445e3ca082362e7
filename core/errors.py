"""Exception types shared by the token manager, dispatcher and tool registry.

Two kinds are visible to MCP callers: authentication failures (`AuthError`)
and everything else. `to_mcp_error` performs that classification.
"""
from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_REQUEST, ErrorData


class EbayMcpError(Exception):
    """Base class for errors raised by this server."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(EbayMcpError):
    pass


class AuthError(EbayMcpError):
    """Credential exchange failed, or eBay answered 401."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ApiError(EbayMcpError):
    """Non-2xx answer from eBay, carrying the upstream message verbatim."""

    def __init__(self, message: str, status_code: int, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class UnknownToolError(EbayMcpError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolArgumentError(EbayMcpError):
    pass


def to_mcp_error(exc: BaseException) -> McpError:
    """Map any exception raised during a tool call to a classified McpError."""
    message = exc.message if isinstance(exc, EbayMcpError) else (str(exc) or type(exc).__name__)
    if isinstance(exc, AuthError):
        return McpError(ErrorData(code=INVALID_REQUEST, message=f"Authentication failed: {message}"))
    return McpError(ErrorData(code=INTERNAL_ERROR, message=f"Tool execution failed: {message}"))
