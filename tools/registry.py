"""Static catalog of MCP tools built from the `get_tools(api)` hooks in this package."""
import inspect
import logging
import pkgutil
from dataclasses import dataclass, field
from importlib import import_module
from pathlib import Path
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from core.errors import ToolArgumentError, UnknownToolError

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "tools"


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    title: str
    description: str
    input_schema: dict[str, Any]
    func: Callable[..., Awaitable[Any]] = field(repr=False, compare=False)
    arguments_model: type[BaseModel] = field(repr=False, compare=False)


def _arguments_model(name: str, func: Callable[..., Any]) -> type[BaseModel]:
    fields: dict[str, Any] = {}
    for param in inspect.signature(func).parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        annotation = Any if param.annotation is inspect.Parameter.empty else param.annotation
        default = ... if param.default is inspect.Parameter.empty else param.default
        fields[param.name] = (annotation, default)
    # unknown argument names are errors, not ignored
    return create_model(f"{name}_arguments", __config__=ConfigDict(extra="forbid"), **fields)


def _input_schema(model: type[BaseModel]) -> dict[str, Any]:
    schema = model.model_json_schema()
    schema.pop("title", None)
    schema.setdefault("properties", {})
    return schema


class ToolRegistry:
    def __init__(self):
        self._tools: dict[str, ToolDefinition] = {}

    def register(self, name: str, func: Callable[..., Awaitable[Any]], title: str | None = None, description: str | None = None) -> ToolDefinition:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        model = _arguments_model(name, func)
        tool = ToolDefinition(
            name=name,
            title=title or name,
            description=description or inspect.getdoc(func) or "",
            input_schema=_input_schema(model),
            func=func,
            arguments_model=model,
        )
        self._tools[name] = tool
        return tool

    def list_tools(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolDefinition:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    async def invoke(self, name: str, args: dict[str, Any] | None = None) -> Any:
        """Validate `args` against the tool's schema and await its wrapper.

        Only arguments the caller supplied are forwarded, so an omitted optional
        parameter never reaches the request as an empty value.
        """
        tool = self.get(name)
        try:
            validated = tool.arguments_model.model_validate(args or {})
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'arguments'}: {err['msg']}" for err in e.errors()
            )
            raise ToolArgumentError(f"Invalid arguments for {name}: {problems}") from e
        kwargs = {key: getattr(validated, key) for key in validated.model_fields_set}
        logger.info(f"Invoking tool {name} with arguments {sorted(kwargs)}")
        return await tool.func(**kwargs)


def build_registry(api) -> ToolRegistry:
    """Collect tools from every public module of the tools package, in module-name order."""
    registry = ToolRegistry()
    tools_path = Path(__file__).resolve().parent
    for _finder, name, _ispkg in pkgutil.iter_modules([str(tools_path)]):
        if name.startswith("_") or name == "registry":
            continue
        module_name = f"{TOOLS_PACKAGE}.{name}"
        mod = import_module(module_name)
        if not hasattr(mod, "get_tools"):
            continue
        for tool_name, meta in mod.get_tools(api).items():
            if isinstance(meta, dict):
                registry.register(tool_name, meta["func"], meta.get("title"), meta.get("description"))
            else:
                registry.register(tool_name, meta)
        logger.debug(f"Loaded tools from {module_name}")
    logger.info(f"Tool registry built with {len(registry)} tools")
    return registry
