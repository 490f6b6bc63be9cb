"""
serve.py - MCP Server Command

Transport modes:
- stdio: newline-delimited JSON-RPC on stdin/stdout (MCP desktop clients)
- http: POST /mcp on a local port (gateways, debugging)

Usage:
    ui-guidelines serve                          # stdio (default)
    ui-guidelines serve --transport http --port 3000
"""

from __future__ import annotations

import asyncio
from enum import Enum

import typer
from rich.panel import Panel

from ui_guidelines.foundation.config.logging import configure_logging, get_logger
from ui_guidelines.foundation.config.settings import get_setting

from ..console import err_console, print_error

logger = get_logger("ui_guidelines.cli.serve")


class TransportMode(str, Enum):
    stdio = "stdio"
    http = "http"


async def run_server(transport: TransportMode, host: str, port: int) -> None:
    """Build the handler and serve it over the chosen transport."""
    from ui_guidelines.handler import create_handler

    handler = create_handler()

    if transport == TransportMode.http:
        from ui_guidelines.mcp.transport.http import run_http

        await run_http(handler, host=host, port=port)
        return

    from ui_guidelines.mcp.server import MCPServer
    from ui_guidelines.mcp.transport.stdio import StdioTransport

    server = MCPServer(handler, StdioTransport())
    await server.start()
    logger.info("Serving on stdio")
    await server.run_forever()


def register_serve_command(app_instance: typer.Typer) -> None:
    """Register the serve command with the main app."""

    @app_instance.command("serve", help="Start the MCP server")
    def serve(
        transport: TransportMode | None = typer.Option(
            None,
            "--transport",
            "-t",
            help="Transport mode (default: mcp.transport setting)",
        ),
        host: str | None = typer.Option(None, "--host", help="Host to bind to (http only)"),
        port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on (http only)"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging"),
    ):
        mode = transport or TransportMode(get_setting("mcp.transport", TransportMode.stdio.value))
        host = host or get_setting("mcp.host", "127.0.0.1")
        port = port if port is not None else int(get_setting("mcp.port", 3000))

        configure_logging(level=str(get_setting("logging.level", "INFO")), verbose=verbose, force=True)

        if mode == TransportMode.http:
            err_console.print(
                Panel(
                    f"[bold green]Starting ui-guidelines MCP over HTTP on {host}:{port}[/bold green]",
                    style="green",
                )
            )

        try:
            asyncio.run(run_server(mode, host, port))
        except KeyboardInterrupt:
            raise typer.Exit(0) from None
        except Exception as e:
            logger.error("Server error", error=str(e), exc_info=True)
            print_error(str(e), title="Server Error")
            raise typer.Exit(1) from None


__all__ = ["TransportMode", "register_serve_command", "run_server"]
