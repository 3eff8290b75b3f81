"""Parser for Daedalus function declarations.

Externals are declared as empty-bodied functions, possibly spread over
several lines::

    func void Doc_Show(var int docID) {};
"""
import re
from typing import List, Optional

from docucomment.constants import CommentSyntax, DeclarationSyntax
from docucomment.core.exceptions import DeclarationError
from docucomment.models.doc_comment import FunctionDeclaration

_IDENT = CommentSyntax.IDENTIFIER_PATTERN

_DECLARATION_RE = re.compile(
    rf"^{DeclarationSyntax.KEYWORD}\s+({_IDENT})\s+({_IDENT})\s*\(([^()]*)\)\s*{re.escape(DeclarationSyntax.TERMINATOR)}$",
    re.DOTALL,
)


def _split_parameters(params_str: str, line_number: Optional[int]) -> List[str]:
    if not params_str.strip():
        return []

    params = []
    for part in params_str.split(","):
        # Collapse line breaks and alignment padding
        param = " ".join(part.split())
        if not param:
            raise DeclarationError("empty parameter in declaration", line_number)
        params.append(param)
    return params


def parse_declaration(text: str, line_number: Optional[int] = None) -> FunctionDeclaration:
    """Parse a ``func <type> <name>(<params>) {};`` declaration.

    Args:
        text: Declaration text ending with ``{};``
        line_number: Line where the declaration starts, for error messages

    Returns:
        Parsed FunctionDeclaration

    Raises:
        DeclarationError: If the text is not a function declaration
    """
    source = text.strip()
    match = _DECLARATION_RE.match(source)
    if not match:
        first_line = source.splitlines()[0] if source else ""
        raise DeclarationError(f"malformed function declaration: {first_line!r}", line_number)

    return_type, name, params_str = match.groups()
    return FunctionDeclaration(
        return_type=return_type,
        name=name,
        parameters=tuple(_split_parameters(params_str, line_number)),
        source=source,
    )
