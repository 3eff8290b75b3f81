"""Markdown rendering.

Documented functions are rendered as MkDocs Material admonitions::

    ### `Doc_Show`
    !!! function "`Doc_Show`"
        Display the document using the document manager ID
        ```dae
        func void Doc_Show(var int docID) {};
        ```

        **Parameters**
        - `#!dae var int docID` - document manager ID

A bare comment without a declaration is rendered without the admonition.
"""
from typing import List, Optional

from docucomment.core.logging import get_logger
from docucomment.models.config import DocuCommentConfig
from docucomment.models.doc_comment import DocComment, DocParam, FunctionDeclaration

logger = get_logger(__name__)


def _indent_lines(text: str, indent: str) -> str:
    return "\n".join(f"{indent}{line}" for line in text.splitlines())


def param_label(param: DocParam, declaration: Optional[FunctionDeclaration]) -> str:
    """Pick the text shown for a documented parameter.

    The matching declaration parameter (e.g. ``var int docID``) is preferred
    over the bare documented name.
    """
    if declaration is None:
        return param.name

    declared = declaration.find_parameter(param.name)
    if declared is None:
        logger.warning(
            "undeclared_param_documented",
            function=declaration.name,
            param=param.name,
            declared=declaration.parameter_names,
        )
        return param.name
    return declared


def _render_sections(comment: DocComment, declaration: Optional[FunctionDeclaration], config: DocuCommentConfig, indent: str) -> List[str]:
    parts = []

    if comment.params:
        parts.append(f"\n{indent}**{config.parameters_label}**  \n")
        for param in comment.params:
            label = param_label(param, declaration)
            if declaration is not None:
                label = f"#!{config.code_language} {label}"
            parts.append(f"{indent}- `{label}` - {param.description}\n")

    if comment.return_description is not None:
        parts.append(f"\n{indent}**{config.return_label}**  \n")
        parts.append(f"{indent}{comment.return_description}\n")

    return parts


def render_markdown(
    comment: DocComment,
    declaration: Optional[FunctionDeclaration] = None,
    config: Optional[DocuCommentConfig] = None,
) -> str:
    """Render a docu comment as Markdown.

    Args:
        comment: Parsed comment
        declaration: Declaration the comment documents, if any
        config: Rendering options (defaults when omitted)

    Returns:
        Markdown text ending with a newline
    """
    config = config or DocuCommentConfig()

    if declaration is None:
        parts = [f"{comment.description}\n"]
        parts.extend(_render_sections(comment, None, config, ""))
        return "".join(parts)

    indent = config.indent
    heading = "#" * config.heading_level
    parts = [
        f"{heading} `{declaration.name}`\n",
        f'!!! {config.admonition_type} "`{declaration.name}`"\n',
        f"{indent}{comment.description}\n",
        f"{indent}```{config.code_language}\n",
        f"{_indent_lines(declaration.source, indent)}\n",
        f"{indent}```\n",
    ]
    parts.extend(_render_sections(comment, declaration, config, indent))
    return "".join(parts)
