"""
Prompt Classification

Literal substring heuristics that decide whether a prompt asks for a
fill-in-the-blank template, and which fallback document applies. Keyword
lists are ordered data; the first match wins.
"""

from typing import Iterable, Optional, Tuple, TypeVar

from generation.direct_responses import DIRECT_RESPONSES
from generation.models import KeywordEntry
from generation.templates import TEMPLATE_CATALOG

# Any of these (case-insensitive) marks a template request
TEMPLATE_REQUEST_KEYWORDS: Tuple[str, ...] = ("template", "example", "format")

T = TypeVar("T", bound=KeywordEntry)


def is_template_request(prompt: str) -> bool:
    """
    Check whether the prompt asks for a template.

    Args:
        prompt: User's free-text prompt

    Returns:
        True if the prompt contains "template", "example" or "format"

    Example:
        >>> is_template_request("Give me an example of grief")
        True
        >>> is_template_request("How do I write a goodbye letter?")
        False
    """
    lowered = prompt.lower()
    return any(keyword in lowered for keyword in TEMPLATE_REQUEST_KEYWORDS)


def first_match(prompt: str, candidates: Iterable[T]) -> Optional[T]:
    """Return the first candidate whose keywords appear in the prompt."""
    for candidate in candidates:
        if candidate.matches(prompt):
            return candidate
    return None


def select_template_id(prompt: str) -> Optional[str]:
    """
    Pick the catalog template for a template request.

    Returns:
        Template id of the first matching keyword group, or None
    """
    entry = first_match(prompt, TEMPLATE_CATALOG)
    return entry.id if entry else None


def select_direct_response_id(prompt: str) -> Optional[str]:
    """
    Pick the hand-written answer for a direct (non-template) question.

    Returns:
        Direct response id of the first matching keyword group, or None
    """
    response = first_match(prompt, DIRECT_RESPONSES)
    return response.id if response else None
