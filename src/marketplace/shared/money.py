"""Rupee amount formatting shared by the storefront, checkout and dashboard."""

from marketplace.config import setting


def format_price(amount: float | int | None) -> str:
    """Format an amount the way prices are shown to shoppers.

    >>> format_price(89999)
    'Rs. 89,999'
    >>> format_price(1250.5)
    'Rs. 1,250.50'
    """
    value = float(amount or 0)
    if value.is_integer():
        return f"{setting('CURRENCY_LABEL')} {value:,.0f}"
    return f"{setting('CURRENCY_LABEL')} {value:,.2f}"


def round_amount(amount: float) -> float:
    """Round to paisa so repeated arithmetic does not drift."""
    return round(float(amount), 2)
