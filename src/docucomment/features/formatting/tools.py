"""MCP tool definitions for docu comment formatting.

This module registers MCP tools for:
- format_doc_comments: Render a whole source text as Markdown/HTML
- parse_doc_comment: Parse a single comment block into structured data
"""

import time
from typing import Any, Dict, Optional

import sentry_sdk
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from docucomment.core.config import get_config
from docucomment.core.logging import get_logger
from docucomment.features.formatting.service import format_source_impl
from docucomment.features.parsing import parse_doc_comment
from docucomment.features.rendering import render_doc_comment
from docucomment.models.doc_comment import OutputFormat

# =============================================================================
# Tool Implementations
# =============================================================================


def format_doc_comments_tool(
    source: str,
    output_format: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Render every documented function in a Daedalus source text.

    Each `///` docu comment must be followed by the `func ... {};`
    declaration it documents.

    **Formats:**
    - `markdown`: MkDocs Material admonitions
    - `html`: One `<section>` per function
    - `comment`: Canonical docu comment text

    Args:
        source: Source text with docu comments and declarations
        output_format: Output format (defaults to the configured one)

    Returns:
        Dictionary containing:
        - summary: Function count, format and timing
        - functions: Names of the rendered functions
        - output: Rendered text

    Example usage:
        result = format_doc_comments(
            source="/// Show a document\\n///\\n/// @param docID id\\nfunc void Doc_Show(var int docID) {};\\n",
            output_format="markdown",
        )
    """
    logger = get_logger("tool.format_doc_comments")
    start_time = time.time()

    logger.info("tool_invoked", tool="format_doc_comments", output_format=output_format, source_length=len(source))

    try:
        result = format_source_impl(source, output_format)

        execution_time = time.time() - start_time
        logger.info(
            "tool_completed",
            tool="format_doc_comments",
            execution_time_seconds=round(execution_time, 3),
            functions_rendered=result.functions_rendered,
        )

        return {
            "summary": {
                "functions_rendered": result.functions_rendered,
                "output_format": result.output_format.value,
                "execution_time_ms": result.execution_time_ms,
            },
            "functions": result.function_names,
            "output": result.output,
        }

    except Exception as e:
        execution_time = time.time() - start_time
        logger.error(
            "tool_failed",
            tool="format_doc_comments",
            execution_time_seconds=round(execution_time, 3),
            error=str(e)[:200],
        )
        sentry_sdk.capture_exception(e)
        raise


def parse_doc_comment_tool(
    comment: str,
    output_format: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Parse a single docu comment block.

    The block is a description line, a blank line, then any number of
    `@param <name> <description>` lines and at most one `@return` line.

    Args:
        comment: Comment block, with or without `///` markers
        output_format: Format for the `rendered` field (defaults to the configured one)

    Returns:
        Dictionary containing:
        - description: The description line
        - params: List of {name, description}
        - return_description: Text of the @return line or None
        - rendered: The block rendered in the requested format
    """
    logger = get_logger("tool.parse_doc_comment")
    start_time = time.time()

    logger.info("tool_invoked", tool="parse_doc_comment", comment_length=len(comment))

    try:
        config = get_config()
        fmt = OutputFormat(output_format) if output_format else config.output_format
        doc = parse_doc_comment(comment, config.comment_marker)
        rendered = render_doc_comment(doc, fmt, None, config)

        execution_time = time.time() - start_time
        logger.info(
            "tool_completed",
            tool="parse_doc_comment",
            execution_time_seconds=round(execution_time, 3),
            params=len(doc.params),
        )

        return {
            "description": doc.description,
            "params": [{"name": p.name, "description": p.description} for p in doc.params],
            "return_description": doc.return_description,
            "rendered": rendered,
        }

    except Exception as e:
        execution_time = time.time() - start_time
        logger.error(
            "tool_failed",
            tool="parse_doc_comment",
            execution_time_seconds=round(execution_time, 3),
            error=str(e)[:200],
        )
        sentry_sdk.capture_exception(e)
        raise


# =============================================================================
# Registration
# =============================================================================


def _create_mcp_field_definitions() -> Dict[str, Dict[str, Any]]:
    """Create field definitions for MCP tool registration."""
    return {
        "format_doc_comments": {
            "source": Field(description="Source text with /// docu comments followed by func declarations"),
            "output_format": Field(default=None, description="Output format ('markdown', 'html', 'comment'); configured default when omitted"),
        },
        "parse_doc_comment": {
            "comment": Field(description="A single docu comment block"),
            "output_format": Field(default=None, description="Format of the 'rendered' field ('markdown', 'html', 'comment')"),
        },
    }


def register_formatting_tools(mcp: FastMCP) -> None:
    """Register all formatting tools with MCP server.

    Args:
        mcp: FastMCP server instance
    """
    fields = _create_mcp_field_definitions()

    @mcp.tool()
    def format_doc_comments(
        source: str = fields["format_doc_comments"]["source"],
        output_format: Optional[str] = fields["format_doc_comments"]["output_format"],
    ) -> Dict[str, Any]:
        """Render docu comments in a Daedalus source text as Markdown or HTML."""
        return format_doc_comments_tool(source=source, output_format=output_format)

    @mcp.tool()
    def parse_doc_comment(
        comment: str = fields["parse_doc_comment"]["comment"],
        output_format: Optional[str] = fields["parse_doc_comment"]["output_format"],
    ) -> Dict[str, Any]:
        """Parse a single docu comment block into description, params and return."""
        return parse_doc_comment_tool(comment=comment, output_format=output_format)
