"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderPlaced:
    """A customer paid for their cart and the order was created.

    Stock, discount usage and checkout donations are all settled from this
    event.
    """

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, seller_id, quantity, price}
    total_amount = Float(required=True)
    discount_code = String()
    discount_code_id = Identifier()
    discount_amount = Float(default=0.0)
    donation_amount = Float(default=0.0)
    charity_id = Identifier()
    final_amount = Float(required=True)
    payment_method = String(required=True)
    payment_status = String(required=True)
    transaction_id = String()
    placed_at = DateTime(required=True)


@marketplace.event(part_of="Order")
class OrderStatusChanged:
    """A seller moved the order along its fulfilment path."""

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    tracking_number = String()
    changed_at = DateTime(required=True)
