"""Repository for the DiscountCode aggregate."""

from marketplace.domain import marketplace
from marketplace.promotions.discount_code import DiscountCode


@marketplace.repository(part_of=DiscountCode)
class DiscountCodeRepository:
    def find_by_code(self, code: str) -> DiscountCode | None:
        """Look a code up the way shoppers type it: case-insensitively."""
        return self._dao.query.filter(code=(code or "").strip().upper()).all().first

    def newest_first(self, seller_id=None) -> list[DiscountCode]:
        query = self._dao.query.order_by("-created_at")
        if seller_id:
            query = query.filter(seller_id=seller_id)
        return query.limit(None).all().items
