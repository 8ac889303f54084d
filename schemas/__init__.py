"""
Pydantic schemas for request/response validation.
"""

from schemas.content import ContentResponse, DraftRequest, ExtractRequest
from schemas.generation import (
    ErrorResponse,
    GenerateContentRequest,
    GenerateContentResponse,
)
from schemas.template import (
    EditorTemplateDetail,
    EditorTemplateSummary,
    TemplateDetail,
    TemplateSummary,
)

__all__ = [
    # Generation schemas
    "GenerateContentRequest",
    "GenerateContentResponse",
    "ErrorResponse",

    # Draft / extraction schemas
    "DraftRequest",
    "ExtractRequest",
    "ContentResponse",

    # Template schemas
    "TemplateSummary",
    "TemplateDetail",
    "EditorTemplateSummary",
    "EditorTemplateDetail",
]
