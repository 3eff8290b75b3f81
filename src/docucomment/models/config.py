"""Configuration models for docucomment."""

from pydantic import BaseModel, Field, field_validator

from docucomment.constants import CommentSyntax, RenderDefaults
from docucomment.models.doc_comment import OutputFormat


class DocuCommentConfig(BaseModel):
    """Settings loaded from a ``docucomment.yaml`` file."""

    comment_marker: str = CommentSyntax.DEFAULT_MARKER
    output_format: OutputFormat = OutputFormat(RenderDefaults.OUTPUT_FORMAT)
    code_language: str = RenderDefaults.CODE_LANGUAGE
    admonition_type: str = RenderDefaults.ADMONITION_TYPE
    heading_level: int = Field(default=RenderDefaults.HEADING_LEVEL, ge=1, le=6)
    parameters_label: str = RenderDefaults.PARAMETERS_LABEL
    return_label: str = RenderDefaults.RETURN_LABEL
    indent: str = RenderDefaults.INDENT

    model_config = {"extra": "forbid"}

    @field_validator("comment_marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Reject markers that are empty or contain whitespace."""
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("comment_marker must be a non-empty string without whitespace")
        return v
