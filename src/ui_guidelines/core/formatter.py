"""
formatter.py - Markdown rendering for guidelines

Pure rendering, no decision logic. Statements are emitted exactly as stored:
never reordered, deduplicated or truncated.
"""

from __future__ import annotations

from collections.abc import Iterable

from .corpus import Corpus


def title_case(name: str) -> str:
    """Upper-case the first character, keep the rest."""
    return name[:1].upper() + name[1:]


def format_bullets(statements: Iterable[str]) -> str:
    return "\n".join(f"- {statement}" for statement in statements)


def format_category(title: str, statements: Iterable[str]) -> str:
    """Render one category as a heading plus one bullet per statement."""
    return f"## {title_case(title)} Guidelines\n{format_bullets(statements)}"


def format_corpus(corpus: Corpus) -> str:
    """Render every category in corpus order, blocks separated by a blank line."""
    return "\n\n".join(
        format_category(category.value, statements) for category, statements in corpus.items()
    )


def format_tips(scenario: str, tips: Iterable[str]) -> str:
    """Render a scenario tip set."""
    return f"## {title_case(scenario)} Quick Tips\n\n{format_bullets(tips)}"


def format_match(category: str, statement: str) -> str:
    """Render a statement tagged with its category in bold."""
    return f"**{category}**: {statement}"


__all__ = [
    "format_bullets",
    "format_category",
    "format_corpus",
    "format_match",
    "format_tips",
    "title_case",
]
