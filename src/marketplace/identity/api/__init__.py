"""Identity API package."""

from marketplace.identity.api.routes import auth_router, seller_router

__all__ = ["auth_router", "seller_router"]
