"""API layer - Routes and hint cookie handling"""

from .routes import router

__all__ = ["router"]
