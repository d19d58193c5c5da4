"""Promotions reacts to placed orders by recording discount code usage."""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.domain import marketplace
from marketplace.ordering.order.events import OrderPlaced
from marketplace.promotions.discount_code import DiscountCode

logger = structlog.get_logger(__name__)


@marketplace.event_handler(part_of=DiscountCode, stream_category="marketplace::order")
class DiscountRedemptionEventHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        if not event.discount_code:
            return

        repo = current_domain.repository_for(DiscountCode)
        discount = repo.find_by_code(event.discount_code)
        if discount is None:
            logger.warning("redeemed_code_missing", order_id=str(event.order_id), code=event.discount_code)
            return

        discount.record_usage(
            order_id=event.order_id,
            discount_amount=event.discount_amount or 0.0,
            customer_id=event.customer_id,
        )
        repo.add(discount)
