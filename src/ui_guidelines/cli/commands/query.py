"""
query.py - One-shot guideline lookups

Each command runs the matching MCP tool and prints its text to stdout,
so the command line and MCP clients always see identical output.
"""

from __future__ import annotations

import asyncio
from typing import Any

import typer

from ui_guidelines.core.docs import DocFormat
from ui_guidelines.core.registry import ALL
from ui_guidelines.core.tools import call_tool

from ..console import print_error, print_result


def run_tool(name: str, arguments: dict[str, Any]) -> None:
    """Run a tool; error results go to stderr with exit code 1."""
    result = asyncio.run(call_tool(name, arguments))
    text = "\n".join(item["text"] for item in result["content"] if item.get("type") == "text")
    if result.get("isError"):
        print_error(text, title=name)
        raise typer.Exit(1)
    print_result(text)


def register_query_commands(app_instance: typer.Typer) -> None:
    """Register the lookup commands with the main app."""

    @app_instance.command("guidelines", help="Show guidelines for a category (or all)")
    def guidelines(
        category: str = typer.Argument(ALL, help="Category name, or 'all'"),
    ):
        run_tool("get_guidelines", {"category": category})

    @app_instance.command("search", help="Search guidelines by keyword")
    def search(query: str = typer.Argument(..., help="Keyword or phrase")):
        run_tool("search_guidelines", {"query": query})

    @app_instance.command("validate", help="Check a pattern description against the guidelines")
    def validate(
        pattern: str = typer.Argument(..., help="Description of the interface pattern"),
        category: str | None = typer.Option(None, "--category", "-c", help="Restrict to one category"),
    ):
        arguments: dict[str, Any] = {"pattern": pattern}
        if category is not None:
            arguments["category"] = category
        run_tool("validate_pattern", arguments)

    @app_instance.command("tips", help="Show quick tips for a scenario")
    def tips(scenario: str = typer.Argument(..., help="Scenario name")):
        run_tool("get_quick_tips", {"scenario": scenario})

    @app_instance.command("docs", help="Fetch the latest upstream documentation")
    def docs(
        format: DocFormat = typer.Option(DocFormat.PREVIEW, "--format", "-f", help="full or preview"),
    ):
        run_tool("get_updated_docs", {"format": format.value})


__all__ = ["register_query_commands", "run_tool"]
