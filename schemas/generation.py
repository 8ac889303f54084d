"""Pydantic schemas for the content generation API."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateContentRequest(BaseModel):
    """Request schema for POST /api/generate"""

    prompt: Optional[str] = Field(
        default=None,
        description="Free-text prompt describing the document to write"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "prompt": "Give me a template for handling my pets"
            }
        }
    )


class GenerateContentResponse(BaseModel):
    """Response schema for POST /api/generate"""

    content: str = Field(..., description="Generated HTML document")
    source: Literal["openai-sdk", "fallback"] = Field(
        ...,
        description="openai-sdk for live provider output, fallback for static content"
    )
    error: Optional[str] = Field(
        default=None,
        description="Warning attached when fallback content was served"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "<h1>Care Instructions for My Beloved Pets</h1>\n<h3>Daily Care</h3>...",
                "source": "fallback",
                "error": "Content provider call failed. Using fallback content."
            }
        }
    )


class ErrorResponse(BaseModel):
    """Error body shared by all content endpoints."""

    error: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Prompt is required"
            }
        }
    )
