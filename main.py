"""docucomment - entry point.

Formats docu comments from the given files (or stdin), or runs the MCP
server with --serve.
"""
import sys

from docucomment.cli import main

if __name__ == "__main__":
    sys.exit(main())
