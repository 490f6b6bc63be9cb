"""
tools.py - MCP tool catalogue

Binds each guideline operation to its name, description, argument model and
annotations. `call_tool` is the single entry point used by the MCP handler
and the CLI: arguments are validated against the tool's model, and
validation failures come back as an error result carrying a readable message
instead of an exception.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent, Tool, ToolAnnotations
from pydantic import ValidationError

from ui_guidelines.foundation.config.logging import get_logger

from . import operations
from .errors import ToolNotFoundError
from .schema import (
    GetGuidelinesArgs,
    GetQuickTipsArgs,
    GetUpdatedDocsArgs,
    SearchGuidelinesArgs,
    ToolArgs,
    ValidatePatternArgs,
)

logger = get_logger("ui_guidelines.tools")


@dataclass(frozen=True)
class ToolSpec:
    """A named operation exposed over MCP."""

    name: str
    description: str
    args_model: type[ToolArgs]
    run: Callable[..., Any]
    open_world: bool = False

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.args_model.input_schema(),
            annotations=ToolAnnotations(
                readOnlyHint=True,
                destructiveHint=False,
                idempotentHint=not self.open_world,
                openWorldHint=self.open_world,
            ),
        )

    async def invoke(self, arguments: dict[str, Any]) -> str:
        """Validate arguments and run the operation.

        Raises:
            pydantic.ValidationError: if the arguments do not match the model.
        """
        args = self.args_model.model_validate(arguments)
        result = self.run(**args.model_dump())
        if inspect.isawaitable(result):
            result = await result
        return result


TOOLS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            name="get_guidelines",
            description=(
                "Get web interface guidelines by category (interactivity, typography, "
                "motion, touch, accessibility, optimizations, design, or all)"
            ),
            args_model=GetGuidelinesArgs,
            run=operations.get_guidelines,
        ),
        ToolSpec(
            name="search_guidelines",
            description="Search for specific guidelines by keyword",
            args_model=SearchGuidelinesArgs,
            run=operations.search_guidelines,
        ),
        ToolSpec(
            name="validate_pattern",
            description="Validate interface patterns against guidelines",
            args_model=ValidatePatternArgs,
            run=operations.validate_pattern,
        ),
        ToolSpec(
            name="get_updated_docs",
            description="Fetch the latest documentation from GitHub repository",
            args_model=GetUpdatedDocsArgs,
            run=operations.get_updated_docs,
            open_world=True,
        ),
        ToolSpec(
            name="get_quick_tips",
            description=(
                "Get quick interface tips for common scenarios (forms, buttons, "
                "animations, mobile, accessibility, optimizations)"
            ),
            args_model=GetQuickTipsArgs,
            run=operations.get_quick_tips,
        ),
    )
}


def get_tool(name: str) -> ToolSpec:
    try:
        return TOOLS[name]
    except KeyError:
        raise ToolNotFoundError(f"Tool not found: {name}") from None


def list_tools() -> list[dict[str, Any]]:
    """Tool entries for a tools/list response."""
    return [spec.to_tool().model_dump(by_alias=True, exclude_none=True) for spec in TOOLS.values()]


def format_validation_error(name: str, error: ValidationError) -> str:
    """Turn a pydantic error into a message an LLM can act on."""
    lines = [f"Invalid arguments for {name}:"]
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "arguments"
        lines.append(f"- {loc}: {err['msg']}")
    return "\n".join(lines)


def build_result(text: str, is_error: bool = False) -> dict[str, Any]:
    """Build a tools/call result payload with a single text item."""
    result = CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)
    return result.model_dump(by_alias=True, exclude_none=True)


async def call_tool(name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
    """Run a tool and return its MCP result payload.

    Raises:
        ToolNotFoundError: if no tool is registered under ``name``.
    """
    spec = get_tool(name)
    try:
        text = await spec.invoke(arguments or {})
    except ValidationError as e:
        logger.info("Rejected tool arguments", tool=name, errors=e.error_count())
        return build_result(format_validation_error(name, e), is_error=True)
    return build_result(text)


__all__ = [
    "TOOLS",
    "ToolSpec",
    "build_result",
    "call_tool",
    "format_validation_error",
    "get_tool",
    "list_tools",
]
