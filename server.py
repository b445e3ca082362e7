from core.logging_config import setup_logging
from core.config import get_config
from core.errors import EbayMcpError, to_mcp_error
from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.resources import TextResource
from mcp import types
from pathlib import Path
import inspect
import json
import sys
from typing import Any, Dict, List, Tuple

from api import SellerApi
from tools.registry import ToolDefinition, ToolRegistry, build_registry

load_dotenv()

logger = setup_logging(level=get_config().get("log_level", "INFO"))

logger.info("MCP server bootstrap starting.")

###################################################### MCP Resources ######################################################

logger.info("Loading MCP resources...")
# Resources folder located next to this server.py file
resources_dir = (Path(__file__).resolve().parent / "resources").resolve()

resource_files: List[Tuple[Path, str]] = []
resource_map: Dict[str, str] = {}

if resources_dir.is_dir():
    for file_path in sorted(resources_dir.iterdir()):
        if file_path.is_file():
            content = file_path.read_text(encoding="utf-8")
            resource_files.append((file_path, content))
            resource_map[file_path.stem.lower()] = content
    logger.info(f"Total resources discovered: {len(resource_files)}, resource names: {list(resource_map.keys())}")

instr = resource_map.get("assistant_instructions")

try:
    mcp = FastMCP("ebay-api-mcp-server", instructions=instr)
    logger.info("MCP server instance created with instructions: %s", bool(instr))
except Exception:
    logger.exception("Failed to create FastMCP instance")
    raise

for file_path, content in resource_files:
    mcp.add_resource(
        TextResource(
            uri=f"resource://{file_path.stem.replace(' ', '_')}",
            name=file_path.stem,
            text=content,
            description=f"Contents of {file_path.name}",
            mime_type="text/markdown",
        )
    )
logger.info(f"Total resources loaded into MCP: {len(resource_files)}")

###################################################### MCP Tools ######################################################

logger.info("Loading MCP tools...")


async def call_tool_text(registry: ToolRegistry, name: str, arguments: dict[str, Any] | None) -> str:
    """Invoke a registry tool and serialize its result; failures leave as classified McpErrors."""
    try:
        result = await registry.invoke(name, arguments or {})
    except Exception as e:
        if not isinstance(e, EbayMcpError):
            logger.exception(f"Tool {name} failed")
        raise to_mcp_error(e) from e
    return json.dumps(result, indent=2, ensure_ascii=False)


def make_wrapper(registry: ToolRegistry, tool: ToolDefinition):
    """Build the async callable FastMCP registers for `tool`.

    FastMCP only uses it to advertise the wrapper method's signature in tools/list;
    tools/call is served by the handler installed in `register_tools`.
    """

    async def _wrapped(**call_kwargs: Any) -> str:
        return await call_tool_text(registry, tool.name, call_kwargs)

    _wrapped.__signature__ = inspect.signature(tool.func).replace(return_annotation=str)
    _wrapped.__name__ = tool.name
    _wrapped.__doc__ = tool.description
    return _wrapped


def register_tools(server: FastMCP, registry: ToolRegistry) -> list[str]:
    """Register every registry tool on `server` and route tools/call through the registry.

    FastMCP's own tools/call handler re-wraps exceptions into an `isError` result,
    which drops the error code. The replacement handler lets the McpError from
    `call_tool_text` reach the low-level session, which answers with a JSON-RPC error.
    """
    registered_tool_names: list[str] = []
    for tool in registry.list_tools():
        server.add_tool(make_wrapper(registry, tool), name=tool.name, title=tool.title, description=tool.description)
        registered_tool_names.append(tool.name)

    async def _handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        text = await call_tool_text(registry, req.params.name, req.params.arguments)
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=text)],
                # matches the {"result": str} output schema FastMCP derives from the wrapper
                structuredContent={"result": text},
                isError=False,
            )
        )

    server._mcp_server.request_handlers[types.CallToolRequest] = _handle_call_tool
    return registered_tool_names


try:
    seller_api = SellerApi.from_config()
except EbayMcpError as e:
    logger.error(f"Cannot start eBay MCP server: {e}")
    print(f"Configuration error: {e}", file=sys.stderr)
    sys.exit(1)

registry = build_registry(seller_api)
registered_tool_names = register_tools(mcp, registry)
logger.info(f"Total tools registered: {len(registered_tool_names)} , tool names: {registered_tool_names}")

###################################################### Startup ######################################################

if __name__ == "__main__":
    logger.info("Starting MCP server (%s)...", seller_api.client.token_manager.credentials.environment)
    try:
        mcp.run(transport="stdio")
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See logs/ for details.", file=sys.stderr)
        sys.exit(-1)
