"""Promotions API package."""

from marketplace.promotions.api.routes import router

__all__ = ["router"]
