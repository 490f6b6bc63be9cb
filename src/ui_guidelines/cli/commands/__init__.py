"""
commands - CLI Command Definitions

Submodules:
- serve.py: MCP server command
- query.py: One-shot guideline lookups
"""

from __future__ import annotations

from .query import register_query_commands
from .serve import register_serve_command

__all__ = ["register_query_commands", "register_serve_command"]
