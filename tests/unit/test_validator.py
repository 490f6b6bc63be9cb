"""Tests for heuristic pattern validation."""

from __future__ import annotations

import pytest

from ui_guidelines.core.corpus import GUIDELINES, Category
from ui_guidelines.core.operations import validate_pattern
from ui_guidelines.core.validator import (
    MAX_RECOMMENDATIONS,
    NO_FINDINGS_MESSAGE,
    ValidationReport,
    Verdict,
    classify,
    validate,
)


class TestClassify:
    """Single-statement classification."""

    def test_negative_fragment_in_pattern_is_issue(self):
        statement = "Buttons should be disabled after submission to avoid duplicate network requests"
        assert classify(statement, "it sends DUPLICATE NETWORK REQUESTS") is Verdict.ISSUE

    def test_negative_without_fragment_is_dropped(self):
        statement = "Buttons should be disabled after submission to avoid duplicate network requests"
        assert classify(statement, "a login form") is None

    def test_negative_never_becomes_recommendation(self):
        """'should' is present too, but the negative marker wins."""
        statement = GUIDELINES[Category.ACCESSIBILITY][-1]
        assert "prevent" in statement
        assert classify(statement, "nested menus") is None
        assert classify(statement, "nested menus", restricted=True) is None

    def test_short_fragment_is_not_evidence(self):
        assert classify("Always avoid it", "it is fine") is None

    def test_marker_at_start(self):
        statement = "Prevent text resizing unexpectedly in landscape mode"
        assert classify(statement, "text resizing unexpectedly in landscape mode happens") is Verdict.ISSUE

    def test_dont_marker(self):
        assert classify("Don't autoplay audio", "we autoplay audio on load") is Verdict.ISSUE

    @pytest.mark.parametrize("statement", ["Do not autoplay audio", "do  NOT autoplay audio"])
    def test_do_not_marker(self, statement):
        assert classify(statement, "we autoplay audio on load") is Verdict.ISSUE
        assert classify(statement, "a quiet page") is None

    def test_markers_match_whole_words_only(self):
        assert classify("Confused users abuse menus", "menus") is None

    def test_donut_is_not_dont(self):
        assert classify("Eat a donut and use sprinkles", "sprinkles") is Verdict.RECOMMENDATION

    def test_positive_unrestricted_always_kept(self):
        assert classify("Use a svg favicon", "totally unrelated") is Verdict.RECOMMENDATION

    def test_positive_restricted_needs_token_overlap(self):
        assert classify("Use a svg favicon", "favicon colors", restricted=True) is Verdict.RECOMMENDATION
        assert classify("Use a svg favicon", "dropdown", restricted=True) is None

    def test_no_marker(self):
        assert classify("Large blur() values may be slow", "blur") is None


class TestValidate:
    def test_duplicate_requests_issue(self):
        report = validate("my form sends duplicate network requests")
        assert [m.statement for m in report.issues] == [
            "Buttons should be disabled after submission to avoid duplicate network requests"
        ]
        assert report.issues[0].category is Category.INTERACTIVITY

    def test_recommendations_capped(self):
        report = validate("my form sends duplicate network requests")
        assert len(report.recommendations) == MAX_RECOMMENDATIONS
        assert [m.statement for m in report.recommendations] == list(
            GUIDELINES[Category.INTERACTIVITY][:MAX_RECOMMENDATIONS]
        )

    def test_issues_are_not_capped(self):
        pattern = "duplicate network requests and layout shift"
        report = validate(pattern)
        assert len(report.issues) == 2

    def test_restricted_to_category(self):
        report = validate("font weight changes on hover causing layout shift", Category.TYPOGRAPHY)
        assert [m.statement for m in report.issues] == [GUIDELINES[Category.TYPOGRAPHY][3]]
        assert all(m.category is Category.TYPOGRAPHY for m in report.recommendations)

    def test_disabled_button_tooltip_is_recommendation(self):
        """The statement has no negative marker, only 'should'."""
        report = validate("disabled button with tooltip", Category.ACCESSIBILITY)
        assert report.issues == []
        assert report.recommendations[0].statement == (
            "Disabled buttons should not have tooltips, they are not accessible"
        )

    def test_restricted_with_no_overlap_is_empty(self):
        report = validate("zzz", Category.DESIGN)
        assert report.is_empty
        assert report.render().endswith(NO_FINDINGS_MESSAGE)

    @pytest.mark.parametrize("pattern", ["", "  \n"])
    def test_empty_pattern_rejected(self, pattern):
        with pytest.raises(ValueError):
            validate(pattern)


class TestRender:
    def test_sections(self):
        report = validate("my form sends duplicate network requests")
        text = report.render()
        assert text.startswith('## Pattern Validation for: "my form sends duplicate network requests"\n\n')
        assert "### ⚠️ Potential Issues:\n**interactivity**: Buttons should be disabled" in text
        assert "### ✅ Relevant Recommendations:\n**interactivity**: Clicking the input label" in text
        assert text.index("Potential Issues") < text.index("Relevant Recommendations")
        assert NO_FINDINGS_MESSAGE not in text

    def test_empty_report(self):
        text = ValidationReport(pattern="p").render()
        assert text == f'## Pattern Validation for: "p"\n\n{NO_FINDINGS_MESSAGE}'


class TestValidateProperties:
    def test_repeated_validation_is_identical(self):
        pattern = "my form sends duplicate network requests"
        assert validate_pattern(pattern) == validate_pattern(pattern)
        assert validate_pattern(pattern, "touch") == validate_pattern(pattern, "touch")

    def test_duplicate_statements_reported_per_category(self):
        corpus = {
            Category.DESIGN: ("Always avoid modal popups",),
            Category.MOTION: ("Always avoid modal popups",),
        }
        report = validate("the page opens modal popups", corpus=corpus)
        assert [m.category for m in report.issues] == [Category.DESIGN, Category.MOTION]
