"""Domain events for the ReturnRequest aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="ReturnRequest")
class ReturnRequested:
    """A customer asked to send back an item from a delivered order."""

    return_id = Identifier(required=True)
    order_id = Identifier(required=True)
    order_item_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    reason = String(required=True)
    refund_amount = Float(required=True)
    requested_at = DateTime(required=True)


@marketplace.event(part_of="ReturnRequest")
class ReturnStatusChanged:
    return_id = Identifier(required=True)
    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    refund_amount = Float()
    changed_at = DateTime(required=True)
