"""
Transport layer: stdio (newline-delimited JSON) and HTTP (POST /mcp).
"""

from .http import create_http_app, run_http
from .stdio import StdioTransport

__all__ = ["StdioTransport", "create_http_app", "run_http"]
