"""
validator.py - Heuristic pattern validation

Classifies guideline statements against a free-text description of an
interface pattern:

- Statements with a negative marker (avoid / don't / do not / prevent) become
  *issues* when the text after the first marker appears verbatim in the pattern.
  Otherwise they are dropped.
- Statements with a positive marker (use / apply / ensure / leverage / should)
  become *recommendations*. Without a category restriction every one of them
  is kept; with a restriction at least one pattern token must occur in the
  statement.
- Everything else is ignored.

Markers are matched as whole words, so "users" never counts as "use".

The unrestricted recommendation rule keeps nearly every positive statement in
the corpus; only MAX_RECOMMENDATIONS bounds the output.

Negations phrased as "should not" carry no negative marker. "Disabled buttons
should not have tooltips" is therefore a recommendation (via "should"), never
an issue, even for a pattern describing a disabled button with a tooltip.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from .corpus import GUIDELINES, Category, Corpus
from .search import MatchResult

NEGATIVE_MARKER = re.compile(r"\b(?:avoid|don't|do\s+not|prevent)\b", re.IGNORECASE)
POSITIVE_MARKER = re.compile(r"\b(?:use|apply|ensure|leverage|should)\b", re.IGNORECASE)

# Shortest trailing fragment that may count as evidence of an issue
MIN_ISSUE_FRAGMENT = 3
MAX_RECOMMENDATIONS = 5

EMPTY_PATTERN_MESSAGE = "Please provide a non-empty pattern to validate."
NO_FINDINGS_MESSAGE = "No specific violations or recommendations found for this pattern."


class Verdict(str, Enum):
    ISSUE = "issue"
    RECOMMENDATION = "recommendation"


def classify(statement: str, pattern: str, restricted: bool = False) -> Verdict | None:
    """Classify a single statement against a pattern.

    Args:
        statement: Guideline text.
        pattern: Free-text description being validated.
        restricted: True when the caller limited validation to one category.

    Returns:
        The verdict, or None when the statement is not relevant.
    """
    lower_pattern = pattern.lower()

    negative = NEGATIVE_MARKER.search(statement)
    if negative is not None:
        fragment = statement[negative.end() :].strip().lower()
        if len(fragment) >= MIN_ISSUE_FRAGMENT and fragment in lower_pattern:
            return Verdict.ISSUE
        return None

    if POSITIVE_MARKER.search(statement) is None:
        return None

    if not restricted:
        return Verdict.RECOMMENDATION

    lower_statement = statement.lower()
    if any(token in lower_statement for token in lower_pattern.split()):
        return Verdict.RECOMMENDATION
    return None


@dataclass(frozen=True)
class ValidationReport:
    """Grouped outcome of a validation run."""

    pattern: str
    category: Category | None = None
    issues: list[MatchResult] = field(default_factory=list)
    recommendations: list[MatchResult] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.issues and not self.recommendations

    def render(self) -> str:
        result = f'## Pattern Validation for: "{self.pattern}"\n\n'

        if self.issues:
            lines = "\n".join(match.render() for match in self.issues)
            result += f"### ⚠️ Potential Issues:\n{lines}\n\n"

        if self.recommendations:
            lines = "\n".join(match.render() for match in self.recommendations)
            result += f"### ✅ Relevant Recommendations:\n{lines}\n\n"

        if self.is_empty:
            result += NO_FINDINGS_MESSAGE

        return result


def validate(
    pattern: str,
    category: Category | None = None,
    corpus: Corpus = GUIDELINES,
) -> ValidationReport:
    """Validate ``pattern`` against the corpus, or one category of it.

    Raises:
        ValueError: if the pattern is empty or only whitespace.
    """
    if not pattern.strip():
        raise ValueError(EMPTY_PATTERN_MESSAGE)

    scope = {category: corpus[category]} if category is not None else corpus
    restricted = category is not None

    issues: list[MatchResult] = []
    recommendations: list[MatchResult] = []
    for cat, statements in scope.items():
        for statement in statements:
            verdict = classify(statement, pattern, restricted)
            if verdict is Verdict.ISSUE:
                issues.append(MatchResult(cat, statement))
            elif verdict is Verdict.RECOMMENDATION:
                recommendations.append(MatchResult(cat, statement))

    return ValidationReport(
        pattern=pattern,
        category=category,
        issues=issues,
        recommendations=recommendations[:MAX_RECOMMENDATIONS],
    )


__all__ = [
    "EMPTY_PATTERN_MESSAGE",
    "MAX_RECOMMENDATIONS",
    "NEGATIVE_MARKER",
    "NO_FINDINGS_MESSAGE",
    "POSITIVE_MARKER",
    "ValidationReport",
    "Verdict",
    "classify",
    "validate",
]
