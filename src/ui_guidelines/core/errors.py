"""Guideline lookup and tool dispatch exceptions."""

from __future__ import annotations


class GuidelinesError(Exception):
    """Base class for ui_guidelines errors."""


class UnknownNameError(GuidelinesError, LookupError):
    """Raised when a name is not part of a closed enumeration."""

    kind = "name"

    def __init__(self, name: str, valid: list[str]):
        self.name = name
        self.valid = list(valid)
        super().__init__(f'Unknown {self.kind} "{name}". Valid: {", ".join(self.valid)}')


class UnknownCategoryError(UnknownNameError):
    """Raised when a category is not in the corpus."""

    kind = "category"


class UnknownScenarioError(UnknownNameError):
    """Raised when a scenario has no quick tips."""

    kind = "scenario"


class ToolNotFoundError(GuidelinesError, LookupError):
    """Raised when an MCP tool name is not registered."""


__all__ = [
    "GuidelinesError",
    "ToolNotFoundError",
    "UnknownCategoryError",
    "UnknownNameError",
    "UnknownScenarioError",
]
