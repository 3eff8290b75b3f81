"""Exception hierarchy for docucomment."""
from enum import Enum
from typing import Optional


class DocuCommentError(Exception):
    """Base class for all docucomment errors."""
    pass


class FormatErrorKind(Enum):
    """Ways a docu comment block can be malformed."""

    MISSING_DESCRIPTION = "missing description"
    MISSING_SEPARATOR = "missing separator"
    MALFORMED_PARAM = "malformed param line"
    DUPLICATE_RETURN = "duplicate return line"
    MALFORMED_RETURN = "malformed return line"
    UNEXPECTED_LINE = "unexpected line"


class FormatError(DocuCommentError):
    """Raised when a docu comment block does not follow the line format.

    The whole block is rejected; there is no partial result.

    Attributes:
        kind: What went wrong
        line_number: 1-based line of the offending line, if known
        line: Offending line text, if any
    """

    def __init__(self, kind: FormatErrorKind, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        self.kind = kind
        self.line_number = line_number
        self.line = line
        message = f"FormatError: {kind.value}"
        if line_number is not None:
            message += f" (line {line_number})"
        if line:
            message += f": {line!r}"
        super().__init__(message)

    def with_offset(self, offset: int) -> "FormatError":
        """Return a copy whose line number is shifted by ``offset``."""
        line_number = None if self.line_number is None else self.line_number + offset
        return FormatError(self.kind, line_number, self.line)


class DeclarationError(DocuCommentError):
    """Raised when a function declaration is missing or cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(f"DeclarationError: {message}")


class ConfigurationError(DocuCommentError):
    """Raised when a configuration file is invalid."""

    def __init__(self, config_path: str, message: str) -> None:
        self.config_path = config_path
        super().__init__(f"Invalid configuration in {config_path}: {message}")
