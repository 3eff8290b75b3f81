"""Formatting feature module.

This module provides:
- Rendering whole source texts and files into documentation
- MCP tools exposing formatting and single-block parsing
"""

from .service import format_file_impl, format_source_impl

__all__ = [
    "format_file_impl",
    "format_source_impl",
]
