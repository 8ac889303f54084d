"""
Content Generation Models

Pydantic models for generation requests/results and the static fallback
catalog entries.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationSource(str, Enum):
    """Where the returned content came from."""

    PROVIDER = "openai-sdk"
    FALLBACK = "fallback"


class GenerationRequest(BaseModel):
    """
    A single content generation call.

    The prompt is not validated here so that the service can reject empty
    prompts with InvalidArgumentError rather than a pydantic error.
    """

    prompt: str = Field(default="", description="Free-text prompt from the user")
    user_name: Optional[str] = Field(
        default=None,
        description="Display name resolved by the identity provider"
    )

    @field_validator("user_name")
    @classmethod
    def normalize_user_name(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank names as missing."""
        if v is None:
            return None
        v = v.strip()
        return v or None


class GenerationResult(BaseModel):
    """
    Generated HTML document returned to the caller.

    content always starts with a tag; the service wraps plain text before
    building a result.
    """

    content: str
    source: GenerationSource
    warning: Optional[str] = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Ensure content is a non-empty HTML fragment."""
        if not v.strip():
            raise ValueError("Generated content cannot be empty")
        if not v.lstrip().startswith("<"):
            raise ValueError("Generated content must start with an HTML tag")
        return v


class KeywordEntry(BaseModel):
    """Static document selected by case-insensitive keyword substring match."""

    model_config = ConfigDict(frozen=True)

    id: str
    keywords: Tuple[str, ...]
    html_body: str

    def matches(self, prompt: str) -> bool:
        lowered = prompt.lower()
        return any(keyword in lowered for keyword in self.keywords)


class TemplateEntry(KeywordEntry):
    """
    Fallback catalog template.

    html_body carries the literal [Your Name] placeholder.
    """

    title: str


class DirectResponse(KeywordEntry):
    """Hand-written answer used when a direct question falls back."""
    pass


class EditorTemplate(BaseModel):
    """Starter document offered by the editor's template picker."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    content: str
    description: Optional[str] = None
