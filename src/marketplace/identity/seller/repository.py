"""Repository for the Seller aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.identity.seller.seller import Seller


@marketplace.repository(part_of=Seller)
class SellerRepository:
    def find_by_user(self, user_id) -> Seller | None:
        return self._dao.query.filter(user_id=str(user_id)).all().first

    def get_by_user(self, user_id) -> Seller:
        seller = self.find_by_user(user_id)
        if seller is None:
            raise ObjectNotFoundError(f"No seller account for user {user_id}")
        return seller
