"""Repository for the Order aggregate."""

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order


@marketplace.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id) -> list[Order]:
        """A customer's orders, newest first."""
        query = self._dao.query.filter(customer_id=str(customer_id)).order_by("-created_at")
        return query.limit(None).all().items

    def for_seller(self, seller_id) -> list[Order]:
        """Orders containing at least one of the seller's products, newest first."""
        orders = self._dao.query.order_by("-created_at").limit(None).all().items
        return [o for o in orders if o.items_for_seller(seller_id)]

    def count(self) -> int:
        return self._dao.query.all().total
