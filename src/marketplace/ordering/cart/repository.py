"""Repository for the Cart aggregate."""

from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart


@marketplace.repository(part_of=Cart)
class CartRepository:
    def for_customer(self, customer_id) -> Cart | None:
        return self._dao.query.filter(customer_id=str(customer_id)).all().first

    def get_or_create(self, customer_id) -> Cart:
        return self.for_customer(customer_id) or Cart.create(customer_id=customer_id)
