"""Core infrastructure for docucomment."""

from docucomment.core.config import (
    get_config,
    parse_args_and_get_config,
    set_config,
    validate_config_file,
)
from docucomment.core.exceptions import (
    ConfigurationError,
    DeclarationError,
    DocuCommentError,
    FormatError,
    FormatErrorKind,
)
from docucomment.core.logging import (
    configure_logging,
    get_logger,
)
from docucomment.core.sentry import (
    init_sentry,
)

__all__ = [
    # Exceptions
    "DocuCommentError",
    "FormatError",
    "FormatErrorKind",
    "DeclarationError",
    "ConfigurationError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "get_config",
    "set_config",
    "validate_config_file",
    "parse_args_and_get_config",
    # Sentry
    "init_sentry",
]
