"""Split a Daedalus source text into documented functions."""
from typing import List, Tuple

from docucomment.constants import CommentSyntax, DeclarationSyntax
from docucomment.core.exceptions import DeclarationError, FormatError
from docucomment.core.logging import get_logger
from docucomment.features.parsing.comment_parser import is_comment_line, parse_doc_comment
from docucomment.features.parsing.declaration_parser import parse_declaration
from docucomment.models.doc_comment import DocumentedFunction

logger = get_logger(__name__)


def _find_terminator(lines: List[str], start: int, marker: str) -> int:
    """Return the index of the line holding the declaration terminator.

    The search stops at a blank line, a comment line or another ``func``
    line, so an unterminated declaration never absorbs the next function.
    """
    for i in range(start, len(lines)):
        line = lines[i]
        if i > start and (
            not line.strip()
            or is_comment_line(line, marker)
            or line.split()[0] == DeclarationSyntax.KEYWORD
        ):
            break
        if DeclarationSyntax.TERMINATOR in line:
            return i
    raise DeclarationError("unterminated function declaration", start + 1)


def _read_declaration(lines: List[str], start: int, marker: str) -> Tuple[str, int]:
    """Read the declaration beginning at ``start``.

    Returns:
        Tuple of (declaration text, index of the line after it)
    """
    end = _find_terminator(lines, start, marker)
    block = lines[start:end + 1]
    last = block[-1]
    block[-1] = last[:last.index(DeclarationSyntax.TERMINATOR) + len(DeclarationSyntax.TERMINATOR)]
    return "\n".join(block), end + 1


def _read_comment_block(lines: List[str], start: int, marker: str) -> Tuple[str, int]:
    """Read consecutive comment lines, allowing blank lines in between.

    Returns:
        Tuple of (block text, index of the first line after the block)
    """
    end = start
    i = start
    while i < len(lines):
        if is_comment_line(lines[i], marker):
            end = i + 1
        elif lines[i].strip():
            break
        i += 1
    return "\n".join(lines[start:end]), end


def _skip_blank(lines: List[str], start: int) -> int:
    i = start
    while i < len(lines) and not lines[i].strip():
        i += 1
    return i


def split_source(source: str, marker: str = CommentSyntax.DEFAULT_MARKER) -> List[DocumentedFunction]:
    """Find every docu comment and the declaration it documents.

    Text outside documented functions, including undocumented
    declarations, is skipped.

    Args:
        source: Whole source text
        marker: Comment marker

    Returns:
        Documented functions in source order

    Raises:
        FormatError: If a comment block is malformed (line numbers are
            relative to ``source``)
        DeclarationError: If a comment block is not followed by a valid
            declaration
    """
    lines = source.splitlines()
    functions: List[DocumentedFunction] = []
    i = 0

    while i < len(lines):
        line = lines[i]
        if not line.strip():
            i += 1
            continue

        if not is_comment_line(line, marker):
            if line.lstrip().startswith(DeclarationSyntax.KEYWORD):
                logger.debug("undocumented_declaration_skipped", line_number=i + 1)
            i += 1
            continue

        comment_start = i
        block, i = _read_comment_block(lines, i, marker)
        try:
            comment = parse_doc_comment(block, marker)
        except FormatError as e:
            raise e.with_offset(comment_start) from e

        i = _skip_blank(lines, i)
        if i >= len(lines) or not lines[i].lstrip().startswith(DeclarationSyntax.KEYWORD):
            raise DeclarationError("docu comment is not followed by a function declaration", comment_start + 1)

        declaration_start = i
        text, i = _read_declaration(lines, i, marker)
        declaration = parse_declaration(text, declaration_start + 1)

        functions.append(
            DocumentedFunction(
                comment=comment,
                declaration=declaration,
                line_number=comment_start + 1,
            )
        )

    logger.debug("source_split", functions=len(functions))
    return functions
