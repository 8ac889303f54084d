"""
API route handlers.
"""

from api.routes.content import router as content_router
from api.routes.generate import router as generate_router
from api.routes.template import router as template_router

__all__ = ["generate_router", "template_router", "content_router"]
