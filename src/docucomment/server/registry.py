"""Central tool registration for MCP server."""

from mcp.server.fastmcp import FastMCP

from docucomment.features.formatting.tools import register_formatting_tools


def register_all_tools(mcp: FastMCP) -> None:
    """Register all MCP tools from all features.

    Formatting (2 tools - format_doc_comments, parse_doc_comment)
    """
    register_formatting_tools(mcp)
