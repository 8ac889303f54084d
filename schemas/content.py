"""Schemas for the draft and extraction endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DraftRequest(BaseModel):
    """Request schema for POST /api/draft"""

    prompt: Optional[str] = Field(default=None)


class ExtractRequest(BaseModel):
    """Request schema for POST /api/extract"""

    url: Optional[str] = Field(default=None)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "url": "https://example.com/articles/planning-your-estate"
            }
        }
    )


class ContentResponse(BaseModel):
    """HTML content returned by the draft and extraction endpoints."""

    content: str
