"""Tests for the five text-in, text-out operations."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from ui_guidelines.core import operations
from ui_guidelines.core.corpus import GUIDELINES, QUICK_TIPS, Category, Scenario
from ui_guidelines.core.docs import DOCS_HEADING, FETCH_FAILED_MESSAGE, TRUNCATION_NOTICE, DocFetcher

CATEGORY_LIST = "interactivity, typography, motion, touch, accessibility, optimizations, design"
SCENARIO_LIST = "forms, buttons, animations, mobile, accessibility, optimizations"


class TestGetGuidelines:
    def test_single_category(self):
        text = operations.get_guidelines("typography")
        lines = text.splitlines()
        assert lines[0] == "## Typography Guidelines"
        assert lines[1:] == [f"- {s}" for s in GUIDELINES[Category.TYPOGRAPHY]]

    def test_accepts_enum(self):
        assert operations.get_guidelines(Category.DESIGN) == operations.get_guidelines("design")

    def test_all_is_default(self):
        assert operations.get_guidelines() == operations.get_guidelines("all")

    def test_all_concatenates_categories(self):
        expected = "\n\n".join(operations.get_guidelines(c.value) for c in Category)
        assert operations.get_guidelines("all") == expected

    def test_all_lists_every_statement(self):
        text = operations.get_guidelines("all")
        assert text.count("\n- ") == sum(len(s) for s in GUIDELINES.values())

    def test_unknown_category(self):
        assert operations.get_guidelines("colors") == (
            f'Category "colors" not found. Available categories: {CATEGORY_LIST}'
        )


class TestSearchGuidelines:
    def test_found(self):
        text = operations.search_guidelines("layout shift")
        assert text.startswith('Found 2 guidelines matching "layout shift":\n\n**typography**: ')

    def test_not_found(self):
        assert operations.search_guidelines("carousel") == 'No guidelines found matching "carousel"'

    def test_empty_query(self):
        assert operations.search_guidelines("  ") == "Please provide a non-empty search query."


class TestValidatePattern:
    def test_with_category(self):
        text = operations.validate_pattern("disabled button with tooltip", "accessibility")
        assert "**accessibility**: Disabled buttons should not have tooltips" in text

    def test_unknown_category(self):
        text = operations.validate_pattern("anything", "colors")
        assert text == f'Category "colors" not found. Available categories: {CATEGORY_LIST}'

    def test_empty_pattern(self):
        assert operations.validate_pattern("") == "Please provide a non-empty pattern to validate."

    def test_all_is_not_a_restriction(self):
        text = operations.validate_pattern("anything", "all")
        assert text.startswith('Category "all" not found.')


class TestGetQuickTips:
    def test_forms(self):
        text = operations.get_quick_tips("forms")
        assert text == "## Forms Quick Tips\n\n" + "\n".join(f"- {t}" for t in QUICK_TIPS[Scenario.FORMS])

    def test_accepts_enum(self):
        assert operations.get_quick_tips(Scenario.MOBILE).startswith("## Mobile Quick Tips")

    def test_unknown_scenario(self):
        assert operations.get_quick_tips("tables") == (
            f'Scenario "tables" not found. Available scenarios: {SCENARIO_LIST}'
        )


class TestGetUpdatedDocs:
    @staticmethod
    def _fetcher(document):
        fetcher = AsyncMock(spec=DocFetcher)
        fetcher.fetch.return_value = document
        return fetcher

    @pytest.mark.asyncio
    async def test_preview_is_default(self):
        text = await operations.get_updated_docs(fetcher=self._fetcher("x" * 2500))
        assert text.startswith(DOCS_HEADING)
        assert TRUNCATION_NOTICE in text

    @pytest.mark.asyncio
    async def test_full(self):
        text = await operations.get_updated_docs("full", fetcher=self._fetcher("x" * 2500))
        assert TRUNCATION_NOTICE not in text
        assert "x" * 2500 in text

    @pytest.mark.asyncio
    async def test_failure(self):
        assert await operations.get_updated_docs(fetcher=self._fetcher(None)) == FETCH_FAILED_MESSAGE
