# schema.py
# Tool argument models (input validation + advertised inputSchema)

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .corpus import Category, Scenario
from .docs import DocFormat
from .registry import ALL, category_names


class ToolArgs(BaseModel):
    """Base for tool arguments: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON schema with $refs inlined and titles stripped."""
        return compact_schema(cls.model_json_schema())


class GetGuidelinesArgs(ToolArgs):
    category: str = Field(
        ALL,
        description="Guideline category, or 'all' for every category",
        json_schema_extra={"enum": [*category_names(), ALL]},
    )


class SearchGuidelinesArgs(ToolArgs):
    query: str = Field(..., description="Keyword or phrase to look for (case-insensitive)")


class ValidatePatternArgs(ToolArgs):
    pattern: str = Field(..., description="Description of the interface pattern to check")
    category: Category | None = Field(
        None, description="Restrict validation to a single category"
    )


class GetUpdatedDocsArgs(ToolArgs):
    format: DocFormat = Field(
        DocFormat.PREVIEW,
        description="'preview' returns the first 2000 characters, 'full' the whole document",
    )


class GetQuickTipsArgs(ToolArgs):
    scenario: Scenario = Field(..., description="Scenario to get tips for")


def compact_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """Inline local $defs, drop titles and collapse Optional[X] to X.

    Optional fields are already expressed by their absence from "required",
    so the null branch only adds noise for MCP clients.
    """
    defs: dict[str, Any] = schema.get("$defs", {})

    def resolve(ref: str) -> dict[str, Any]:
        target = dict(defs[ref.rsplit("/", 1)[-1]])
        target.pop("title", None)
        target.pop("description", None)
        return target

    def walk(value: Any, in_properties: bool = False) -> Any:
        if isinstance(value, list):
            return [walk(item) for item in value]
        if not isinstance(value, dict):
            return value

        if in_properties:
            return {key: walk(item) for key, item in value.items()}

        node = dict(value)
        all_of = node.get("allOf")
        if isinstance(all_of, list) and len(all_of) == 1:
            node.pop("allOf")
            node = {**all_of[0], **node}
        if "$ref" in node:
            ref = node.pop("$ref")
            node = {**resolve(ref), **node}

        any_of = node.get("anyOf")
        if isinstance(any_of, list):
            branches = [b for b in any_of if b != {"type": "null"}]
            if len(branches) == 1 and len(branches) != len(any_of):
                node.pop("anyOf")
                branch = branches[0]
                if "$ref" in branch:
                    branch = resolve(branch["$ref"])
                node = {**branch, **node}
                if node.get("default", ...) is None:
                    node.pop("default")

        out: dict[str, Any] = {}
        for key, item in node.items():
            if key in ("title", "$defs"):
                continue
            out[key] = walk(item, in_properties=(key == "properties"))
        return out

    return walk(schema)


__all__ = [
    "GetGuidelinesArgs",
    "GetQuickTipsArgs",
    "GetUpdatedDocsArgs",
    "SearchGuidelinesArgs",
    "ToolArgs",
    "ValidatePatternArgs",
    "compact_schema",
]
