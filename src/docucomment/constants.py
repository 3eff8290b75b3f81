"""Shared constants across the docucomment codebase.

This module centralizes marker strings, tag keywords and rendering
defaults so the parser and the renderers agree on them.
"""


class CommentSyntax:
    """Docu comment line syntax."""

    DEFAULT_MARKER = "///"
    PARAM_TAG = "@param"
    RETURN_TAG = "@return"

    # Parameter names follow identifier rules
    IDENTIFIER_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"


class DeclarationSyntax:
    """Daedalus function declaration syntax."""

    KEYWORD = "func"
    TERMINATOR = "{};"


class RenderDefaults:
    """Default rendering options."""

    OUTPUT_FORMAT = "markdown"
    CODE_LANGUAGE = "dae"
    ADMONITION_TYPE = "function"
    HEADING_LEVEL = 3
    PARAMETERS_LABEL = "Parameters"
    RETURN_LABEL = "Return value"
    INDENT = "\t"

    # Joins consecutive rendered functions
    BLOCK_SEPARATOR = "\n"


class LoggingDefaults:
    """Logging configuration defaults."""

    LEVEL = "INFO"
    LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class EnvVars:
    """Environment variables read at start-up."""

    CONFIG = "DOCUCOMMENT_CONFIG"
    LOG_LEVEL = "LOG_LEVEL"
    LOG_FILE = "LOG_FILE"
    SENTRY_DSN = "SENTRY_DSN"
    SENTRY_ENVIRONMENT = "SENTRY_ENVIRONMENT"
