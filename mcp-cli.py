#!/usr/bin/env python3
"""mcp-cli: run eBay MCP tools by hand, without an MCP client.

Features:
- List the tool catalog: --list
- One-shot invocation: --tool get_orders --args '{"limit": 5}'
- Interactive REPL (no flags): /tools, /tool <name> [json-args], /status, /quit
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

import httpx
from dotenv import load_dotenv

load_dotenv()  # Loads variables from .env into the environment

from api import SellerApi  # noqa: E402
from core.errors import EbayMcpError  # noqa: E402
from core.logging_config import setup_logging  # noqa: E402
from tools.registry import ToolRegistry, build_registry  # noqa: E402

ASSISTANT_NAME = "eBay MCP"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="mcp-cli: list and invoke eBay MCP tools locally")
    p.add_argument("--list", action="store_true", help="Print the available tools and their argument schemas")
    p.add_argument("--tool", help="Name of a tool to invoke once")
    p.add_argument("--args", default="{}", help="JSON object of tool arguments for --tool")
    p.add_argument("--log-level", default="WARNING", help="Logging level for the run (default WARNING)")
    return p.parse_args()


def print_json(obj: Any) -> None:
    try:
        print(json.dumps(obj, indent=2, ensure_ascii=False))
    except (TypeError, ValueError):
        print(obj)


def display(msg: Any) -> None:
    """Print a message with a blank line before and after.
    If msg is not a string, pretty-print JSON via print_json.
    """
    print()
    if isinstance(msg, str):
        print(msg)
    else:
        print_json(msg)
    print()


def describe_tools(registry: ToolRegistry, with_schema: bool = False) -> str:
    parts = []
    for tool in registry.list_tools():
        parts.append(f"{tool.name}: {tool.description}")
        if with_schema:
            parts.append("    " + json.dumps(tool.input_schema.get("properties", {})))
    return "\n".join(parts)


def parse_tool_args(raw: str | None) -> dict[str, Any]:
    if not raw or not raw.strip():
        return {}
    parsed = json.loads(raw)
    if not isinstance(parsed, dict):
        raise ValueError("tool arguments must be a JSON object")
    return parsed


async def invoke_tool(registry: ToolRegistry, tool_name: str, raw_args: str | None) -> bool:
    """Invoke one tool and display the result. Returns False when the call failed."""
    try:
        args = parse_tool_args(raw_args)
    except ValueError as e:
        display(f"Invalid arguments: {e}")
        return False
    try:
        result = await registry.invoke(tool_name, args)
    except (EbayMcpError, httpx.HTTPError) as e:
        display(f"{type(e).__name__}: {e}")
        return False
    print(f"\n{ASSISTANT_NAME} [{tool_name}]:")
    print_json(result)
    return True


async def repl(api: SellerApi, registry: ToolRegistry) -> None:
    print("Starting interactive tool runner against:", api.client.base_url)
    print()
    print("Options:")
    print("- /quit or Ctrl-C to exit.")
    print("- /tools to list all available tools")
    print("- /tool <name> [json-args] to invoke a tool")
    print("- /status to show the cached token state")
    loop = asyncio.get_running_loop()
    while True:
        print()
        try:
            prompt = (await loop.run_in_executor(None, input, "You: ")).strip()
        except EOFError:
            break
        if not prompt:
            continue
        if prompt in ("/quit", "/exit"):
            break
        if prompt == "/tools":
            display("Available tools:\n" + describe_tools(registry))
            continue
        if prompt == "/status":
            display(api.client.token_manager.status())
            continue
        if prompt.startswith("/tool "):
            parts = prompt.split(maxsplit=2)
            if len(parts) >= 2:
                await invoke_tool(registry, parts[1], parts[2] if len(parts) == 3 else None)
            else:
                print("Usage: /tool <tool_name> [json-args]")
            continue
        print("Unknown command. Use /tools, /tool <name> [json-args], /status or /quit.")


async def run(args: argparse.Namespace) -> int:
    try:
        api = SellerApi.from_config()
    except EbayMcpError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        registry = build_registry(api)
        if args.list:
            display("Available tools:\n" + describe_tools(registry, with_schema=True))
            return 0
        if args.tool:
            return 0 if await invoke_tool(registry, args.tool, args.args) else 1
        await repl(api, registry)
        return 0
    finally:
        await api.aclose()


def main() -> int:
    args = parse_args()
    setup_logging(log_file_name="mcp-cli.log", level=args.log_level)
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())
