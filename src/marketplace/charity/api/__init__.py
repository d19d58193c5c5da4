"""Charity API package."""

from marketplace.charity.api.routes import charity_router, donation_router, goods_router

__all__ = ["charity_router", "donation_router", "goods_router"]
