"""ReturnRequest aggregate: a customer's request to send an item back.

State Machine:
    PENDING → IN_PROGRESS | APPROVED | REJECTED
    IN_PROGRESS → APPROVED | REJECTED
    APPROVED, REJECTED → (terminal)
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace
from marketplace.ordering.returns.events import ReturnRequested, ReturnStatusChanged


class ReturnStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    APPROVED = "approved"
    REJECTED = "rejected"


OPEN_STATUSES = {ReturnStatus.PENDING.value, ReturnStatus.IN_PROGRESS.value}

_VALID_TRANSITIONS = {
    ReturnStatus.PENDING: {ReturnStatus.IN_PROGRESS, ReturnStatus.APPROVED, ReturnStatus.REJECTED},
    ReturnStatus.IN_PROGRESS: {ReturnStatus.APPROVED, ReturnStatus.REJECTED},
    ReturnStatus.APPROVED: set(),
    ReturnStatus.REJECTED: set(),
}


@marketplace.aggregate
class ReturnRequest:
    order_id = Identifier(required=True)
    order_item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    seller_id = Identifier()
    customer_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    reason = String(max_length=255)
    details = Text()
    refund_amount = Float(required=True, min_value=0.0)
    status = String(choices=ReturnStatus, default=ReturnStatus.PENDING.value)
    resolution_notes = Text()
    requested_at = DateTime()
    resolved_at = DateTime()

    @invariant.post
    def reason_is_required(self):
        if not (self.reason or "").strip():
            raise ValidationError({"reason": ["Please tell us why you are returning this item"]})

    @classmethod
    def request(cls, order, item, customer_id, reason, details=None):
        now = datetime.now(UTC)
        request = cls(
            order_id=str(order.id),
            order_item_id=str(item.id),
            product_id=str(item.product_id),
            product_name=item.product_name,
            seller_id=item.seller_id,
            customer_id=customer_id,
            quantity=item.quantity,
            reason=reason,
            details=details,
            refund_amount=item.line_total,
            status=ReturnStatus.PENDING.value,
            requested_at=now,
        )
        request.raise_(
            ReturnRequested(
                return_id=str(request.id),
                order_id=str(order.id),
                order_item_id=str(item.id),
                customer_id=str(customer_id),
                reason=reason,
                refund_amount=request.refund_amount,
                requested_at=now,
            )
        )
        return request

    def change_status(self, new_status, notes=None):
        current = ReturnStatus(self.status)
        target = ReturnStatus(new_status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot change return status from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        if notes:
            self.resolution_notes = notes
        if target in (ReturnStatus.APPROVED, ReturnStatus.REJECTED):
            self.resolved_at = now

        self.raise_(
            ReturnStatusChanged(
                return_id=str(self.id),
                order_id=str(self.order_id),
                previous_status=current.value,
                new_status=target.value,
                refund_amount=self.refund_amount if target == ReturnStatus.APPROVED else None,
                changed_at=now,
            )
        )

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES
