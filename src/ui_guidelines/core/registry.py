"""
registry.py - Category/Scenario Registry

Closed key sets derived from the corpus, plus name resolution used at the
input boundary. The literal "all" expands to the full corpus for categories;
scenarios have no such shortcut.
"""

from __future__ import annotations

from types import MappingProxyType

from .corpus import GUIDELINES, QUICK_TIPS, Category, Corpus, Scenario
from .errors import UnknownCategoryError, UnknownScenarioError

ALL = "all"


def category_names() -> list[str]:
    """Valid category keys, in corpus order."""
    return [category.value for category in GUIDELINES]


def scenario_names() -> list[str]:
    """Valid scenario keys, in tip-set order."""
    return [scenario.value for scenario in QUICK_TIPS]


def parse_category(name: str | Category) -> Category:
    """Map a raw name onto a Category, raising UnknownCategoryError."""
    if isinstance(name, Category):
        return name
    try:
        category = Category(name)
    except ValueError:
        raise UnknownCategoryError(str(name), category_names()) from None
    if category not in GUIDELINES:
        raise UnknownCategoryError(category.value, category_names())
    return category


def resolve_category(name: str | Category) -> Corpus:
    """Resolve a category argument to the statements in scope.

    Returns the full corpus for "all", otherwise a single-entry read-only
    mapping holding only the named category.
    """
    if name == ALL:
        return GUIDELINES
    category = parse_category(name)
    return MappingProxyType({category: GUIDELINES[category]})


def resolve_scenario(name: str | Scenario) -> tuple[str, ...]:
    """Resolve a scenario argument to its tip list."""
    try:
        scenario = Scenario(name)
    except ValueError:
        raise UnknownScenarioError(str(name), scenario_names()) from None
    tips = QUICK_TIPS.get(scenario)
    if tips is None:
        raise UnknownScenarioError(scenario.value, scenario_names())
    return tips


__all__ = [
    "ALL",
    "category_names",
    "parse_category",
    "resolve_category",
    "resolve_scenario",
    "scenario_names",
]
