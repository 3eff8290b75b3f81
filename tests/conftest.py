"""Shared pytest fixtures for the docucomment test suite.

This module provides common fixtures used across unit and integration tests,
reducing duplication and standardizing test setup.
"""

from pathlib import Path

import pytest
import structlog

from docucomment.core.config import set_config
from docucomment.models.config import DocuCommentConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# State Management Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def quiet_logging():
    """Send structlog output nowhere and keep loggers uncached between tests."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_config():
    """Restore the default configuration after each test."""
    yield
    set_config(DocuCommentConfig())


# ============================================================================
# Sample Source Fixtures
# ============================================================================

@pytest.fixture
def externals_path() -> Path:
    """Path to a Daedalus externals file with three documented functions."""
    return FIXTURES_DIR / "externals.d"


@pytest.fixture
def externals_source(externals_path: Path) -> str:
    """Contents of the externals fixture file."""
    return externals_path.read_text(encoding="utf-8")


@pytest.fixture
def doc_show_source() -> str:
    """A single documented function."""
    return (
        "/// Display the document using the document manager ID\n"
        "///\n"
        "/// @param docID document manager ID\n"
        "func void Doc_Show(var int docID) {};\n"
    )


@pytest.fixture
def full_comment() -> str:
    """A comment block using every line kind."""
    return (
        "/// Blend two colors\n"
        "///\n"
        "/// @param first first color\n"
        "/// @param second second color\n"
        "/// @return the blended color\n"
    )


# ============================================================================
# Mock MCP Server Fixtures
# ============================================================================

@pytest.fixture
def mock_mcp_instance():
    """Provide a mock MCP server instance for testing tools.

    Returns:
        MockFastMCP: Mock MCP instance
    """

    class MockFastMCP:
        """Mock FastMCP instance for testing."""

        def __init__(self):
            self.tools = {}

        def tool(self):
            """Decorator for registering tools."""
            def decorator(func):
                self.tools[func.__name__] = func
                return func
            return decorator

        def run(self, **kwargs):
            pass

    return MockFastMCP()
