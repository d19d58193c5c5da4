"""Domain events for the DiscountCode aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="DiscountCode")
class DiscountCodeCreated:
    """A seller published a new discount code."""

    discount_code_id = Identifier(required=True)
    code = String(required=True)
    discount_type = String(required=True)
    value = Float(required=True)
    min_amount = Float()
    valid_until = DateTime()


@marketplace.event(part_of="DiscountCode")
class DiscountCodeUpdated:
    discount_code_id = Identifier(required=True)
    code = String(required=True)
    is_active = String(required=True)


@marketplace.event(part_of="DiscountCode")
class DiscountCodeRedeemed:
    """An order was placed with the code applied."""

    discount_code_id = Identifier(required=True)
    code = String(required=True)
    order_id = Identifier(required=True)
    customer_id = Identifier()
    discount_amount = Float(required=True)
    usage_count = Integer(required=True)
