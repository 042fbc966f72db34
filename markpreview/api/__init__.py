"""API routes."""

from .markup import router as markup_router

__all__ = ["markup_router"]
