"""Configuration management for docucomment."""

import argparse
import os
import sys
from typing import List, Optional

import yaml

from docucomment.constants import EnvVars, LoggingDefaults
from docucomment.core.exceptions import ConfigurationError
from docucomment.core.logging import configure_logging, get_logger
from docucomment.models.config import DocuCommentConfig
from docucomment.models.doc_comment import OutputFormat

# Global variable for config path (will be set by parse_args_and_get_config)
CONFIG_PATH: Optional[str] = None

# Active configuration, replaced once at start-up
_config: DocuCommentConfig = DocuCommentConfig()


def get_config() -> DocuCommentConfig:
    """Return the active configuration."""
    return _config


def set_config(config: DocuCommentConfig) -> None:
    global _config
    _config = config


def validate_config_file(config_path: str) -> DocuCommentConfig:
    """Validate a docucomment.yaml file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated DocuCommentConfig model

    Raises:
        ConfigurationError: If config file is invalid
    """
    if not os.path.exists(config_path):
        raise ConfigurationError(config_path, "File does not exist")

    if not os.path.isfile(config_path):
        raise ConfigurationError(config_path, "Path is not a file")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(config_path, f"YAML parsing failed: {e}") from e
    except OSError as e:
        raise ConfigurationError(config_path, f"Failed to read file: {e}") from e

    if config_data is None:
        raise ConfigurationError(config_path, "Config file is empty")

    if not isinstance(config_data, dict):
        raise ConfigurationError(config_path, "Config must be a YAML dictionary")

    try:
        return DocuCommentConfig(**config_data)
    except Exception as e:
        raise ConfigurationError(config_path, f"Validation failed: {e}") from e


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="docucomment",
        description="Convert /// docu comments into Markdown or HTML documentation",
        epilog="""
environment variables:
  DOCUCOMMENT_CONFIG Path to docucomment.yaml file (overridden by --config flag)
  LOG_LEVEL          Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)
  LOG_FILE           Path to log file (logs to stderr by default)
  SENTRY_DSN         Enables Sentry error reporting when set
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Source files to format (reads stdin when omitted)",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Output format (default: from config, else markdown)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        metavar="PATH",
        default=None,
        help="Write output to PATH instead of stdout",
    )
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to docucomment.yaml file with rendering options",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=LoggingDefaults.LEVELS,
        default=None,
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Can also be set via LOG_LEVEL env var. Default: INFO",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        default=None,
        help="Path to log file (logs to stderr by default). Can also be set via LOG_FILE env var.",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the MCP server over stdio instead of formatting files",
    )
    return parser


def _resolve_config_path(args: argparse.Namespace) -> Optional[str]:
    """Resolve config file path from args or environment.

    Precedence: --config flag > DOCUCOMMENT_CONFIG env > None
    """
    if args.config:
        return str(args.config)
    return os.environ.get(EnvVars.CONFIG) or None


def _configure_logging_from_args(args: argparse.Namespace) -> None:
    """Configure logging based on command-line arguments and environment.

    Precedence: --log-level/--log-file flags > env vars > defaults
    """
    log_level = args.log_level or os.environ.get(EnvVars.LOG_LEVEL, LoggingDefaults.LEVEL)
    log_file = args.log_file or os.environ.get(EnvVars.LOG_FILE)
    configure_logging(log_level=log_level, log_file=log_file)


def parse_args_and_get_config(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments, configure logging and load the config file.

    Calls sys.exit(1) if the config file is invalid.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    global CONFIG_PATH

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    _configure_logging_from_args(args)

    CONFIG_PATH = _resolve_config_path(args)
    if CONFIG_PATH:
        try:
            set_config(validate_config_file(CONFIG_PATH))
        except ConfigurationError as e:
            logger = get_logger("config")
            logger.error("config_validation_failed", config_path=CONFIG_PATH, error=str(e))
            print(str(e), file=sys.stderr)
            sys.exit(1)
    else:
        set_config(DocuCommentConfig())

    return args
