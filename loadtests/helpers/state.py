"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state; nothing is shared between
users. State tracks tokens and IDs returned by earlier steps so follow-up
requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    headers: dict = field(default_factory=dict)
    product_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)


@dataclass
class SellerState:
    headers: dict = field(default_factory=dict)
    seller_id: str | None = None
    category_id: str | None = None
    product_ids: list[str] = field(default_factory=list)
    discount_code_ids: list[str] = field(default_factory=list)


@dataclass
class DonorState:
    headers: dict = field(default_factory=dict)
    charity_ids: list[str] = field(default_factory=list)
    goods_donation_ids: list[str] = field(default_factory=list)
