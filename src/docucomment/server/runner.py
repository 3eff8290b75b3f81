"""MCP server entry point."""

from mcp.server.fastmcp import FastMCP

from docucomment.core.sentry import init_sentry
from docucomment.server.registry import register_all_tools

# Create FastMCP instance
mcp = FastMCP("docucomment")


def run_mcp_server() -> None:
    """Run the MCP server.

    Configuration and logging are expected to be set up by the caller.

    This function:
    1. Initializes Sentry error tracking (if configured)
    2. Registers all MCP tools
    3. Starts the MCP server with stdio transport
    """
    init_sentry()
    register_all_tools(mcp)
    mcp.run(transport="stdio")
