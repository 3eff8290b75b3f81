"""Canonical docu comment rendering.

Output parses back into an equal DocComment.
"""
from typing import Optional

from docucomment.constants import CommentSyntax
from docucomment.models.config import DocuCommentConfig
from docucomment.models.doc_comment import DocComment, FunctionDeclaration


def render_comment(
    comment: DocComment,
    declaration: Optional[FunctionDeclaration] = None,
    config: Optional[DocuCommentConfig] = None,
) -> str:
    config = config or DocuCommentConfig()
    marker = config.comment_marker

    lines = [f"{marker} {comment.description}", marker]
    for param in comment.params:
        lines.append(f"{marker} {CommentSyntax.PARAM_TAG} {param.name} {param.description}")
    if comment.return_description is not None:
        lines.append(f"{marker} {CommentSyntax.RETURN_TAG} {comment.return_description}")
    if declaration is not None:
        lines.append(declaration.source)
    return "\n".join(lines) + "\n"
