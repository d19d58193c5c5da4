"""Charity reacts to orders by recording the donation added at checkout.

Prepaid orders carry a collected donation. On cash-on-delivery orders the
donation waits for delivery, and is dropped if the order is cancelled.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.charity.donation.donation import Donation, DonationStatus
from marketplace.domain import marketplace
from marketplace.ordering.order.events import OrderPlaced, OrderStatusChanged
from marketplace.ordering.order.order import OrderStatus, PaymentStatus

logger = structlog.get_logger(__name__)


@marketplace.event_handler(part_of=Donation, stream_category="marketplace::order")
class CheckoutDonationEventHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        if not event.donation_amount or event.donation_amount <= 0:
            return

        details = dict(
            user_id=event.customer_id,
            amount=event.donation_amount,
            payment_method=event.payment_method,
            charity_id=event.charity_id,
            order_id=event.order_id,
        )
        if event.payment_status == PaymentStatus.PAID.value:
            donation = Donation.completed(transaction_id=event.transaction_id, **details)
        else:
            donation = Donation.pending(**details)

        current_domain.repository_for(Donation).add(donation)
        logger.info(
            "checkout_donation_recorded",
            order_id=str(event.order_id),
            charity_id=str(event.charity_id) if event.charity_id else None,
            amount=event.donation_amount,
            status=donation.status,
        )

    @handle(OrderStatusChanged)
    def on_order_status_changed(self, event: OrderStatusChanged) -> None:
        if event.new_status not in (OrderStatus.DELIVERED.value, OrderStatus.CANCELLED.value):
            return

        repo = current_domain.repository_for(Donation)
        pending = (
            repo._dao.query.filter(order_id=event.order_id, status=DonationStatus.PENDING.value).all().items
        )
        for donation in pending:
            if event.new_status == OrderStatus.DELIVERED.value:
                donation.complete()
            else:
                donation.fail("Order was cancelled")
            repo.add(donation)
            logger.info(
                "checkout_donation_settled",
                order_id=str(event.order_id),
                donation_id=str(donation.id),
                status=donation.status,
            )
