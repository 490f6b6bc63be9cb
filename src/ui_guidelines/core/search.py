"""
search.py - Keyword search over the guideline corpus

Case-insensitive substring matching. Results keep corpus order (category
order, then statement order) and are neither ranked nor deduplicated.
"""

from __future__ import annotations

from dataclasses import dataclass

from .corpus import GUIDELINES, Category, Corpus
from .formatter import format_match

EMPTY_QUERY_MESSAGE = "Please provide a non-empty search query."


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A statement together with the category it came from."""

    category: Category
    statement: str

    def render(self) -> str:
        return format_match(self.category.value, self.statement)


def search(query: str, corpus: Corpus = GUIDELINES) -> list[MatchResult]:
    """Return every statement containing ``query``, ignoring case.

    Raises:
        ValueError: if the query is empty or only whitespace.
    """
    if not query.strip():
        raise ValueError(EMPTY_QUERY_MESSAGE)

    needle = query.lower()
    return [
        MatchResult(category, statement)
        for category, statements in corpus.items()
        for statement in statements
        if needle in statement.lower()
    ]


def render_search(query: str, matches: list[MatchResult]) -> str:
    """Render search results, or the fixed no-match message."""
    if not matches:
        return f'No guidelines found matching "{query}"'
    body = "\n\n".join(match.render() for match in matches)
    return f'Found {len(matches)} guidelines matching "{query}":\n\n{body}'


__all__ = ["EMPTY_QUERY_MESSAGE", "MatchResult", "render_search", "search"]
