"""Rendering of parsed docu comments.

This module provides renderers for:
- Markdown (MkDocs admonitions for documented functions)
- HTML (Jinja2 template)
- Canonical docu comment text
"""
from typing import Callable, Dict, Iterable, Optional

from docucomment.constants import RenderDefaults
from docucomment.models.config import DocuCommentConfig
from docucomment.models.doc_comment import DocComment, DocumentedFunction, FunctionDeclaration, OutputFormat

from .comment import render_comment
from .html import render_html
from .markdown import render_markdown

Renderer = Callable[[DocComment, Optional[FunctionDeclaration], Optional[DocuCommentConfig]], str]

RENDERERS: Dict[OutputFormat, Renderer] = {
    OutputFormat.MARKDOWN: render_markdown,
    OutputFormat.HTML: render_html,
    OutputFormat.COMMENT: render_comment,
}


def render_doc_comment(
    comment: DocComment,
    output_format: OutputFormat = OutputFormat.MARKDOWN,
    declaration: Optional[FunctionDeclaration] = None,
    config: Optional[DocuCommentConfig] = None,
) -> str:
    """Render one comment in the requested format."""
    return RENDERERS[output_format](comment, declaration, config)


def render_functions(
    functions: Iterable[DocumentedFunction],
    output_format: OutputFormat = OutputFormat.MARKDOWN,
    config: Optional[DocuCommentConfig] = None,
) -> str:
    """Render documented functions and join them in order."""
    return RenderDefaults.BLOCK_SEPARATOR.join(
        render_doc_comment(f.comment, output_format, f.declaration, config) for f in functions
    )


__all__ = [
    "RENDERERS",
    "render_comment",
    "render_doc_comment",
    "render_functions",
    "render_html",
    "render_markdown",
]
