"""Docu comment block parser.

A docu comment block has a fixed line layout::

    /// Display the document using the document manager ID
    ///
    /// @param docID document manager ID
    /// @return Returns nothing useful

The first line is the description, the second line must be blank and the
remaining lines are ``@param`` and ``@return`` tags. Any deviation rejects
the whole block with a :class:`FormatError`.
"""
import re
from typing import List, Optional, Tuple

from docucomment.constants import CommentSyntax
from docucomment.core.exceptions import FormatError, FormatErrorKind
from docucomment.core.logging import get_logger
from docucomment.models.doc_comment import DocComment, DocParam

logger = get_logger(__name__)

_PARAM_RE = re.compile(
    rf"^{re.escape(CommentSyntax.PARAM_TAG)}\s+({CommentSyntax.IDENTIFIER_PATTERN})\s+(\S.*)$"
)


def is_comment_line(line: str, marker: str = CommentSyntax.DEFAULT_MARKER) -> bool:
    """Check whether a raw source line starts with the comment marker."""
    return line.lstrip().startswith(marker)


def strip_comment_marker(line: str, marker: str = CommentSyntax.DEFAULT_MARKER) -> str:
    """Remove leading whitespace, the comment marker and surrounding spaces.

    Lines without a marker are treated as already stripped.

    Args:
        line: Raw line
        marker: Comment marker (``///`` by default)

    Returns:
        Line content with surrounding whitespace removed
    """
    content = line.lstrip()
    if content.startswith(marker):
        content = content[len(marker):]
    return content.strip()


def strip_comment_markers(text: str, marker: str = CommentSyntax.DEFAULT_MARKER) -> List[Tuple[int, str]]:
    """Strip markers from every line of a block.

    Whitespace-only lines before the first line of the block are dropped.

    Args:
        text: Raw comment block
        marker: Comment marker

    Returns:
        List of (1-based line number, stripped content) pairs
    """
    raw_lines = text.splitlines()
    start = 0
    while start < len(raw_lines) and not raw_lines[start].strip():
        start += 1
    return [(i + 1, strip_comment_marker(raw_lines[i], marker)) for i in range(start, len(raw_lines))]


def _tag_of(content: str) -> str:
    parts = content.split(None, 1)
    return parts[0] if parts else ""


def _parse_param(line_number: int, content: str) -> DocParam:
    match = _PARAM_RE.match(content)
    if not match:
        raise FormatError(FormatErrorKind.MALFORMED_PARAM, line_number, content)
    name, description = match.groups()
    return DocParam(name=name, description=description.strip())


def _parse_return(line_number: int, content: str) -> str:
    parts = content.split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise FormatError(FormatErrorKind.MALFORMED_RETURN, line_number, content)
    return parts[1].strip()


def parse_doc_comment(text: str, marker: str = CommentSyntax.DEFAULT_MARKER) -> DocComment:
    """Parse one docu comment block.

    Args:
        text: Raw block, with or without comment markers
        marker: Comment marker to strip

    Returns:
        Parsed DocComment

    Raises:
        FormatError: If the block does not follow the line format
    """
    lines = strip_comment_markers(text, marker)
    if not lines:
        raise FormatError(FormatErrorKind.MISSING_DESCRIPTION)

    description_line, description = lines[0]
    if not description or _tag_of(description) in (CommentSyntax.PARAM_TAG, CommentSyntax.RETURN_TAG):
        raise FormatError(FormatErrorKind.MISSING_DESCRIPTION, description_line, description or None)

    if len(lines) < 2:
        raise FormatError(FormatErrorKind.MISSING_SEPARATOR, description_line + 1)
    separator_line, separator = lines[1]
    if separator:
        raise FormatError(FormatErrorKind.MISSING_SEPARATOR, separator_line, separator)

    params: List[DocParam] = []
    return_description: Optional[str] = None

    for line_number, content in lines[2:]:
        if not content:
            continue

        tag = _tag_of(content)
        if tag == CommentSyntax.PARAM_TAG:
            params.append(_parse_param(line_number, content))
        elif tag == CommentSyntax.RETURN_TAG:
            if return_description is not None:
                raise FormatError(FormatErrorKind.DUPLICATE_RETURN, line_number, content)
            return_description = _parse_return(line_number, content)
        else:
            raise FormatError(FormatErrorKind.UNEXPECTED_LINE, line_number, content)

    logger.debug(
        "doc_comment_parsed",
        params=len(params),
        has_return=return_description is not None,
    )

    return DocComment(
        description=description,
        params=tuple(params),
        return_description=return_description,
    )
