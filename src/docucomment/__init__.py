"""docucomment - render /// docu comments as Markdown or HTML."""

from docucomment.core.exceptions import DeclarationError, DocuCommentError, FormatError, FormatErrorKind
from docucomment.features.formatting.service import format_file_impl, format_source_impl
from docucomment.features.parsing import parse_declaration, parse_doc_comment, split_source
from docucomment.features.rendering import render_doc_comment, render_functions
from docucomment.models.doc_comment import DocComment, DocParam, DocumentedFunction, FunctionDeclaration, OutputFormat

__version__ = "0.1.0"

__all__ = [
    "DeclarationError",
    "DocComment",
    "DocParam",
    "DocuCommentError",
    "DocumentedFunction",
    "FormatError",
    "FormatErrorKind",
    "FunctionDeclaration",
    "OutputFormat",
    "format_file_impl",
    "format_source_impl",
    "parse_declaration",
    "parse_doc_comment",
    "render_doc_comment",
    "render_functions",
    "split_source",
]
