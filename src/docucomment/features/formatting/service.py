"""Formatting service.

Turns a whole source text (or file) into rendered documentation.
"""
import time
from typing import Optional, Union

from docucomment.core.config import get_config
from docucomment.core.logging import get_logger
from docucomment.features.parsing import split_source
from docucomment.features.rendering import render_functions
from docucomment.models.config import DocuCommentConfig
from docucomment.models.doc_comment import FormatResult, OutputFormat

logger = get_logger(__name__)


def _resolve_format(output_format: Union[str, OutputFormat, None], config: DocuCommentConfig) -> OutputFormat:
    if output_format is None:
        return config.output_format
    if isinstance(output_format, OutputFormat):
        return output_format
    return OutputFormat(output_format)


def format_source_impl(
    source: str,
    output_format: Union[str, OutputFormat, None] = None,
    config: Optional[DocuCommentConfig] = None,
) -> FormatResult:
    """Render every documented function in a source text.

    Args:
        source: Source text holding docu comments and declarations
        output_format: markdown, html or comment (defaults to the config's)
        config: Rendering options (defaults to the active configuration)

    Returns:
        FormatResult with the rendered output

    Raises:
        FormatError: If a comment block is malformed
        DeclarationError: If a declaration is missing or malformed
        ValueError: If output_format is unknown
    """
    start_time = time.time()
    config = config or get_config()
    fmt = _resolve_format(output_format, config)

    logger.info("format_source_started", output_format=fmt.value, source_length=len(source))

    functions = split_source(source, config.comment_marker)
    output = render_functions(functions, fmt, config)

    execution_time = int((time.time() - start_time) * 1000)

    logger.info(
        "format_source_completed",
        functions_rendered=len(functions),
        output_format=fmt.value,
        execution_time_ms=execution_time,
    )

    return FormatResult(
        output=output,
        functions_rendered=len(functions),
        output_format=fmt,
        function_names=[f.declaration.name for f in functions],
        execution_time_ms=execution_time,
    )


def format_file_impl(
    file_path: str,
    output_format: Union[str, OutputFormat, None] = None,
    config: Optional[DocuCommentConfig] = None,
) -> FormatResult:
    """Read a UTF-8 source file and render it.

    Args:
        file_path: Path to the source file
        output_format: markdown, html or comment (defaults to the config's)
        config: Rendering options (defaults to the active configuration)

    Returns:
        FormatResult with the rendered output
    """
    logger.debug("format_file", file=file_path)
    with open(file_path, "r", encoding="utf-8") as f:
        source = f.read()
    return format_source_impl(source, output_format, config)
