"""Marketplace settings read from the ``[custom]`` table of ``domain.toml``."""

import os

from marketplace.domain import marketplace

_DEFAULTS = {
    "CURRENCY_LABEL": "Rs.",
    "DELIVERY_FEE": 0,
    "PAYMENT_STEP_DELAY": 1.0,
    "PAYMENT_SUCCESS_RATE": 0.9,
    "LOW_STOCK_THRESHOLD": 10,
    "MAX_IMAGE_BYTES": 5 * 1024 * 1024,
    "RETURN_WINDOW_DAYS": 30,
    "PRODUCT_IMAGE_BUCKET": "product-images",
}


def setting(name: str):
    """Return a marketplace setting, falling back to the built-in default."""
    custom = marketplace.config.get("custom") or {}
    if name in custom:
        return custom[name]
    return _DEFAULTS[name]


def backend() -> str:
    """Name of the external backend adapters to use ("fake" or "supabase")."""
    return os.getenv("MARKETPLACE_BACKEND", "fake").lower()


def supabase_credentials() -> tuple[str, str]:
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_ANON_KEY")
    if not url or not key:
        raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY must be set to use the Supabase backend")
    return url.rstrip("/"), key
