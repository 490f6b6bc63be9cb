"""
ui_guidelines.cli - Command line interface

Usage:
    ui-guidelines serve --transport stdio
    ui-guidelines guidelines typography
    ui-guidelines search "layout shift"
"""

from .app import app, main

__all__ = ["app", "main"]
