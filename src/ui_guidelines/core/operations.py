"""
operations.py - The five guideline operations

Each operation takes plain arguments and returns a single text block.
Validation problems (unknown category, empty query, ...) are answered with
an explanatory message rather than an exception.
"""

from __future__ import annotations

from ui_guidelines.foundation.config.logging import get_logger
from ui_guidelines.foundation.config.settings import get_setting

from .corpus import Category, Scenario
from .docs import PREVIEW_LIMIT, DocFetcher, DocFormat, render_docs
from .errors import UnknownCategoryError, UnknownScenarioError
from .formatter import format_category, format_corpus, format_tips
from .registry import ALL, parse_category, resolve_category, resolve_scenario
from .search import EMPTY_QUERY_MESSAGE, render_search, search
from .validator import EMPTY_PATTERN_MESSAGE, validate

logger = get_logger("ui_guidelines.operations")


def get_guidelines(category: str | Category = ALL) -> str:
    """Render one category, or every category for "all"."""
    try:
        scope = resolve_category(category)
    except UnknownCategoryError as e:
        return f'Category "{e.name}" not found. Available categories: {", ".join(e.valid)}'

    if category == ALL:
        return format_corpus(scope)

    cat = parse_category(category)
    return format_category(cat.value, scope[cat])


def search_guidelines(query: str) -> str:
    """Case-insensitive keyword search across all categories."""
    if not query.strip():
        return EMPTY_QUERY_MESSAGE

    matches = search(query)
    logger.debug("Search finished", query=query, matches=len(matches))
    return render_search(query, matches)


def validate_pattern(pattern: str, category: str | Category | None = None) -> str:
    """Report potential issues and relevant recommendations for a pattern."""
    if not pattern.strip():
        return EMPTY_PATTERN_MESSAGE

    scope: Category | None = None
    if category is not None:
        try:
            scope = parse_category(category)
        except UnknownCategoryError as e:
            return f'Category "{e.name}" not found. Available categories: {", ".join(e.valid)}'

    report = validate(pattern, scope)
    logger.debug(
        "Pattern validated",
        category=scope.value if scope else ALL,
        issues=len(report.issues),
        recommendations=len(report.recommendations),
    )
    return report.render()


async def get_updated_docs(
    format: str | DocFormat = DocFormat.PREVIEW,
    fetcher: DocFetcher | None = None,
) -> str:
    """Fetch the upstream README and render it in full or as a preview."""
    fetcher = fetcher or DocFetcher()
    document = await fetcher.fetch()
    limit = int(get_setting("docs.preview_limit", PREVIEW_LIMIT))
    return render_docs(document, DocFormat(format), limit=limit)


def get_quick_tips(scenario: str | Scenario) -> str:
    """Render the quick tips for a scenario."""
    try:
        tips = resolve_scenario(scenario)
    except UnknownScenarioError as e:
        return f'Scenario "{e.name}" not found. Available scenarios: {", ".join(e.valid)}'
    return format_tips(Scenario(scenario).value, tips)


__all__ = [
    "get_guidelines",
    "get_quick_tips",
    "get_updated_docs",
    "search_guidelines",
    "validate_pattern",
]
