"""
Services module for business logic.
"""

from services.content_generator import ContentGenerator

__all__ = ["ContentGenerator"]
