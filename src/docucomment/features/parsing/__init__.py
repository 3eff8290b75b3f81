"""Docu comment and declaration parsing.

This module provides:
- Parsing of a single docu comment block into a DocComment
- Parsing of Daedalus function declarations
- Splitting a whole source text into documented functions
"""

from .comment_parser import is_comment_line, parse_doc_comment, strip_comment_marker, strip_comment_markers
from .declaration_parser import parse_declaration
from .source_parser import split_source

__all__ = [
    "is_comment_line",
    "parse_doc_comment",
    "strip_comment_marker",
    "strip_comment_markers",
    "parse_declaration",
    "split_source",
]
