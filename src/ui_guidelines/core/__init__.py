"""
ui_guidelines.core - Guideline corpus and query logic

Modules:
    corpus: Static guideline and quick-tip data
    registry: Category/scenario resolution
    formatter: Markdown rendering
    search: Keyword search
    validator: Heuristic pattern validation
    docs: Upstream documentation fetcher
    operations: The five text-in, text-out operations
    schema: Tool argument models
    tools: MCP tool catalogue
"""

from .corpus import GUIDELINES, QUICK_TIPS, Category, Scenario
from .errors import (
    GuidelinesError,
    ToolNotFoundError,
    UnknownCategoryError,
    UnknownScenarioError,
)
from .operations import (
    get_guidelines,
    get_quick_tips,
    get_updated_docs,
    search_guidelines,
    validate_pattern,
)

__all__ = [
    "GUIDELINES",
    "QUICK_TIPS",
    "Category",
    "GuidelinesError",
    "Scenario",
    "ToolNotFoundError",
    "UnknownCategoryError",
    "UnknownScenarioError",
    "get_guidelines",
    "get_quick_tips",
    "get_updated_docs",
    "search_guidelines",
    "validate_pattern",
]
