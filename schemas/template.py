"""Template catalog Pydantic schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class TemplateSummary(BaseModel):
    """Catalog entry as listed by GET /api/templates"""

    id: str
    title: str
    keywords: List[str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "pet-care",
                "title": "Care Instructions for My Beloved Pets",
                "keywords": ["pet", "animal", "dog", "cat"]
            }
        }
    )


class TemplateDetail(BaseModel):
    """Rendered template returned by GET /api/templates/{template_id}"""

    id: str
    title: str
    content: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "goodbye-note",
                "title": "My Farewell Note",
                "content": "<h1>My Farewell Note</h1>\n<p>Dear loved ones,</p>..."
            }
        }
    )


class EditorTemplateSummary(BaseModel):
    """Editor template as listed by GET /api/templates/editor"""

    value: str
    label: str
    description: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "value": "final-wishes",
                "label": "Final Wishes",
                "description": "Outline your funeral preferences and final messages"
            }
        }
    )


class EditorTemplateDetail(EditorTemplateSummary):
    """Rendered editor template with [Your Name] filled in when known"""

    content: str
