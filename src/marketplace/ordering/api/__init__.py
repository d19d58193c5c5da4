"""Ordering API package."""

from marketplace.ordering.api.routes import cart_router, checkout_router, order_router, return_router

__all__ = ["cart_router", "checkout_router", "order_router", "return_router"]
