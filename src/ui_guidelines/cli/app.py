"""app.py - Typer Application Configuration"""

from __future__ import annotations

import os

import typer

from ui_guidelines.foundation.config.logging import configure_logging
from ui_guidelines.foundation.config.settings import get_setting, get_settings

app = typer.Typer(
    name="ui-guidelines",
    help="Web interface guidelines: MCP server and command line lookup",
    add_completion=False,
)


@app.callback()
def _root(
    conf: str | None = typer.Option(
        None,
        "--conf",
        help="Configuration directory (overrides PRJ_CONFIG_HOME)",
    ),
) -> None:
    if conf:
        os.environ["PRJ_CONFIG_HOME"] = conf
        get_settings().reload()
    # Logs go to stderr so stdout stays clean for results and JSON-RPC frames
    configure_logging(level=str(get_setting("logging.level", "INFO")))


def main():
    """Entry point for CLI (used by pyproject.toml scripts)."""
    app()


# Register subcommands
from .commands import register_query_commands, register_serve_command  # noqa: E402

register_serve_command(app)
register_query_commands(app)


__all__ = ["app", "main"]
