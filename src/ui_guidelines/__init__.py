"""
ui_guidelines - Web Interface Guidelines over MCP

Layers:
    foundation: Logging and settings
    core: Guideline corpus, search, pattern validation, tool catalogue
    mcp: JSON-RPC routing and transports (stdio, http)
    handler: MCP method handling on top of the tool catalogue
    cli: Typer command line
"""

__version__ = "0.1.0"
