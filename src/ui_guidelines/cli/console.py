"""
console.py - Console and Output Formatting

UNIX Philosophy:
- stderr: Logs, panels, errors (visible to user, invisible to pipes)
- stdout: Only tool results (pure data for pipes)
"""

from __future__ import annotations

import sys

from rich.console import Console
from rich.panel import Panel

# err_console: responsible for UI, panels and errors (user visible, pipe invisible)
err_console = Console(stderr=True)


def print_result(text: str) -> None:
    """Write a tool result to stdout."""
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")
    sys.stdout.flush()


def print_error(message: str, title: str = "Error") -> None:
    """Show an error panel on stderr."""
    err_console.print(Panel(message, title=f"[bold red]{title}[/bold red]", border_style="red", expand=False))


__all__ = ["err_console", "print_error", "print_result"]
