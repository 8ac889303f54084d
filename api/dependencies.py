"""Request-scoped dependencies for the content API."""

from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from generation.provider import ContentProvider, UnconfiguredContentProvider
from services.content_generator import ContentGenerator


def get_user_name(
    x_user_name: Annotated[Optional[str], Header()] = None,
) -> Optional[str]:
    """
    Display name forwarded by the identity provider in x-user-name.

    Blank values count as missing.
    """
    if x_user_name is None:
        return None
    return x_user_name.strip() or None


def get_content_provider(request: Request) -> ContentProvider:
    """
    Provider created during application startup.

    Falls back to an unconfigured provider if startup did not run, so
    requests still get fallback content.
    """
    provider = getattr(request.app.state, "content_provider", None)
    if provider is None:
        return UnconfiguredContentProvider()
    return provider


def get_content_generator(
    provider: ContentProvider = Depends(get_content_provider),
) -> ContentGenerator:
    return ContentGenerator(provider)


# Type aliases for dependency injection
UserName = Annotated[Optional[str], Depends(get_user_name)]
ContentService = Annotated[ContentGenerator, Depends(get_content_generator)]
