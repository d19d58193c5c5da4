"""Sales analytics for a seller's dashboard.

Figures only count the seller's own lines of each order, so a seller never
sees revenue from another store's products in a shared order.
"""

from collections import Counter
from datetime import UTC, datetime

from marketplace.catalogue.product.product import Product
from marketplace.config import setting
from marketplace.ordering.order.order import Order, OrderStatus
from marketplace.shared.money import round_amount

REVENUE_MONTHS = 6
TOP_PRODUCTS = 5


def _month_key(moment: datetime) -> tuple[int, int]:
    return moment.year, moment.month


def _previous_months(now: datetime, count: int) -> list[tuple[int, int]]:
    """``count`` (year, month) pairs ending with the month of ``now``, oldest first."""
    year, month = now.year, now.month
    months = []
    for _ in range(count):
        months.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(months))


def monthly_revenue(orders: list[Order], seller_id) -> Counter:
    revenue = Counter()
    for order in orders:
        if order.status != OrderStatus.CANCELLED.value and order.created_at:
            revenue[_month_key(order.created_at)] += order.seller_subtotal(seller_id)
    return revenue


def growth_percentage(current: float, previous: float) -> float:
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round((current - previous) / previous * 100, 1)


def seller_analytics(seller_id, products: list[Product], orders: list[Order], now: datetime | None = None) -> dict:
    now = now or datetime.now(UTC)
    live_orders = [o for o in orders if o.status != OrderStatus.CANCELLED.value]
    revenue = monthly_revenue(orders, seller_id)
    months = _previous_months(now, REVENUE_MONTHS)
    threshold = int(setting("LOW_STOCK_THRESHOLD"))

    top_products = sorted(products, key=lambda p: p.sales_count or 0, reverse=True)[:TOP_PRODUCTS]

    return {
        "total_sales": round_amount(sum(o.seller_subtotal(seller_id) for o in live_orders)),
        "total_orders": len(orders),
        "total_products": len(products),
        "total_customers": len({str(o.customer_id) for o in orders}),
        "monthly_growth": growth_percentage(revenue[months[-1]], revenue[months[-2]]),
        "top_products": [
            {
                "product_id": str(p.id),
                "name": p.name,
                "sales": p.sales_count or 0,
                "revenue": round_amount((p.sales_count or 0) * p.price),
            }
            for p in top_products
        ],
        "order_status_distribution": dict(Counter(o.status for o in orders)),
        "revenue_by_month": [
            {"month": datetime(year, month, 1).strftime("%b %Y"), "revenue": round_amount(revenue[(year, month)])}
            for year, month in months
        ],
        "low_stock_products": sum(1 for p in products if (p.stock_quantity or 0) < threshold),
        "out_of_stock_products": sum(1 for p in products if (p.stock_quantity or 0) == 0),
    }
