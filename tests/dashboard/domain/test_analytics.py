from datetime import UTC, datetime

import pytest
from marketplace.dashboard.analytics import growth_percentage, seller_analytics


@pytest.mark.parametrize(
    "current, previous, expected",
    [
        (1500, 1000, 50.0),
        (500, 1000, -50.0),
        (1000, 0, 100.0),
        (0, 0, 0.0),
        (1, 3, -66.7),
    ],
)
def test_growth_percentage(current, previous, expected):
    assert growth_percentage(current, previous) == expected


def test_empty_store():
    analytics = seller_analytics("seller-1", products=[], orders=[], now=datetime(2024, 2, 15, tzinfo=UTC))

    assert analytics["total_sales"] == 0
    assert analytics["monthly_growth"] == 0.0
    assert [m["month"] for m in analytics["revenue_by_month"]] == [
        "Sep 2023",
        "Oct 2023",
        "Nov 2023",
        "Dec 2023",
        "Jan 2024",
        "Feb 2024",
    ]
    assert analytics["top_products"] == []
