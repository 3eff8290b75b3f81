"""Data models for docucomment."""

from docucomment.models.config import DocuCommentConfig
from docucomment.models.doc_comment import (
    DocComment,
    DocParam,
    DocumentedFunction,
    FormatResult,
    FunctionDeclaration,
    OutputFormat,
)

__all__ = [
    # Config
    "DocuCommentConfig",
    # Doc comments
    "DocComment",
    "DocParam",
    "DocumentedFunction",
    "FormatResult",
    "FunctionDeclaration",
    "OutputFormat",
]
