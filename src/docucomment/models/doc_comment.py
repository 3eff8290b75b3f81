"""Data models for parsed docu comments and function declarations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class OutputFormat(Enum):
    """Supported rendering targets."""

    MARKDOWN = "markdown"
    HTML = "html"
    COMMENT = "comment"


@dataclass(frozen=True)
class DocParam:
    """A single ``@param`` entry.

    Attributes:
        name: Parameter name as written after ``@param``
        description: Rest of the line
    """

    name: str
    description: str

    def __iter__(self) -> Iterator[str]:
        yield self.name
        yield self.description


@dataclass(frozen=True)
class DocComment:
    """One parsed docu comment block.

    Attributes:
        description: The single description line
        params: Parameters in the order they were written
        return_description: Text of the ``@return`` line, if present
    """

    description: str
    params: Tuple[DocParam, ...] = ()
    return_description: Optional[str] = None

    @property
    def param_names(self) -> List[str]:
        return [p.name for p in self.params]


@dataclass(frozen=True)
class FunctionDeclaration:
    """A Daedalus ``func`` declaration following a docu comment.

    Attributes:
        return_type: Declared return type (e.g. ``void``, ``int``)
        name: Function name
        parameters: Raw parameter declarations (e.g. ``var int docID``)
        source: Declaration text up to and including the trailing ``{};``
    """

    return_type: str
    name: str
    parameters: Tuple[str, ...] = ()
    source: str = ""

    @property
    def parameter_names(self) -> List[str]:
        """Last identifier of every parameter declaration."""
        return [p.split()[-1] for p in self.parameters]

    def find_parameter(self, name: str) -> Optional[str]:
        for declared, declared_name in zip(self.parameters, self.parameter_names):
            if declared_name == name:
                return declared
        return None


@dataclass(frozen=True)
class DocumentedFunction:
    """A docu comment together with the declaration it documents.

    Attributes:
        comment: Parsed comment block
        declaration: Declaration following the block
        line_number: 1-based line where the comment starts in the source
    """

    comment: DocComment
    declaration: FunctionDeclaration
    line_number: int = 1


@dataclass
class FormatResult:
    """Result of formatting a source text.

    Attributes:
        output: Rendered text
        functions_rendered: Number of documented functions rendered
        output_format: Target format used
        function_names: Names of the rendered functions, in order
        execution_time_ms: Execution time in milliseconds
    """

    output: str
    functions_rendered: int
    output_format: OutputFormat
    function_names: List[str] = field(default_factory=list)
    execution_time_ms: int = 0
