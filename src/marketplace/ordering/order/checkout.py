"""Checkout: turn a customer's cart into a paid order.

The handler prices the cart from the current catalogue, applies an
optional discount code and donation, runs the mock payment for the final
amount and only then records the order. A declined payment leaves the cart
untouched and records nothing.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.charity.charity.charity import Charity
from marketplace.config import setting
from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart
from marketplace.ordering.cart.items import available_product, ensure_in_stock
from marketplace.ordering.order.order import Order, ShippingDetails
from marketplace.payments.gateway import get_gateway
from marketplace.payments.methods import validate_payment_details
from marketplace.payments.pricing import price_breakdown
from marketplace.promotions.application import apply_code
from marketplace.shared.contact import is_valid_email, is_valid_phone
from marketplace.shared.money import format_price
from marketplace.shared.text import missing_fields

logger = structlog.get_logger(__name__)

REQUIRED_SHIPPING_FIELDS = {
    "first_name": "first name",
    "last_name": "last name",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "city": "city",
}


@marketplace.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier()
    first_name = String(max_length=100)
    last_name = String(max_length=100)
    email = String(max_length=254)
    phone = String(max_length=20)
    address = String(max_length=500)
    city = String(max_length=100)
    state = String(max_length=100)
    postal_code = String(max_length=20)
    notes = Text()
    payment_method = String(required=True, max_length=20)
    payment_details = Text()  # JSON object, fields depend on the payment method
    discount_code = String(max_length=50)
    donation_amount = Float(default=0.0)
    charity_id = Identifier()


def _shipping_from(command) -> ShippingDetails:
    values = {name: getattr(command, name) for name in REQUIRED_SHIPPING_FIELDS}
    missing = missing_fields(values, REQUIRED_SHIPPING_FIELDS)
    if missing:
        raise ValidationError({"shipping": [f"Please fill in: {', '.join(missing)}"]})
    if not is_valid_email(command.email):
        raise ValidationError({"email": ["Please enter a valid email address"]})
    if not is_valid_phone(command.phone):
        raise ValidationError({"phone": ["Please enter a valid phone number"]})

    return ShippingDetails(
        first_name=command.first_name.strip(),
        last_name=command.last_name.strip(),
        email=command.email.strip(),
        phone=command.phone.strip(),
        address=command.address.strip(),
        city=command.city.strip(),
        state=(command.state or "").strip() or None,
        postal_code=command.postal_code,
    )


def _priced_lines(cart: Cart) -> list[dict]:
    lines = []
    for item in cart.items:
        product = available_product(item.product_id)
        ensure_in_stock(product, item.quantity)
        lines.append(
            {
                "product_id": str(product.id),
                "product_name": product.name,
                "seller_id": str(product.seller_id),
                "quantity": item.quantity,
                "price": product.price,
            }
        )
    return lines


def _check_charity(charity_id):
    try:
        charity = current_domain.repository_for(Charity).get(charity_id)
    except ObjectNotFoundError:
        charity = None
    if charity is None or not charity.is_active:
        raise ValidationError({"charity_id": ["Please choose an active charity for your donation"]})


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        if not command.customer_id:
            raise ValidationError({"customer_id": ["You need to be logged in to place an order"]})

        cart = current_domain.repository_for(Cart).for_customer(command.customer_id)
        if cart is None or cart.is_empty():
            raise ValidationError({"cart": ["Your cart is empty"]})

        shipping = _shipping_from(command)
        details = json.loads(command.payment_details) if command.payment_details else {}
        method = validate_payment_details(command.payment_method, details)

        lines = _priced_lines(cart)
        subtotal = sum(line["price"] * line["quantity"] for line in lines)
        delivery_fee = float(setting("DELIVERY_FEE"))

        discount = None
        if command.discount_code and command.discount_code.strip():
            discount = apply_code(command.discount_code, subtotal + delivery_fee)
            if not discount.success:
                raise ValidationError({"discount_code": [discount.message]})

        donation_amount = command.donation_amount or 0.0
        if donation_amount < 0:
            raise ValidationError({"donation_amount": ["Donation amount cannot be negative"]})
        charity_id = command.charity_id if donation_amount > 0 else None
        if charity_id:
            _check_charity(charity_id)

        breakdown = price_breakdown(
            subtotal=subtotal,
            delivery_fee=delivery_fee,
            discount_amount=discount.discount_amount if discount else 0.0,
            donation_amount=donation_amount,
        )

        order = Order.draft(
            customer_id=command.customer_id,
            items=lines,
            shipping=shipping,
            payment_method=method.value,
            total_amount=breakdown.subtotal + breakdown.delivery_fee,
            delivery_fee=breakdown.delivery_fee,
            discount_code=discount.code if discount else None,
            discount_code_id=discount.discount_code_id if discount else None,
            discount_amount=breakdown.discount_amount,
            donation_amount=breakdown.donation_amount,
            charity_id=charity_id,
            final_amount=breakdown.total,
            notes=command.notes,
        )

        result = get_gateway().charge(breakdown.total, method.value, details)
        if not result.success:
            logger.warning(
                "checkout_payment_declined",
                customer_id=str(command.customer_id),
                amount=breakdown.total,
                method=method.value,
            )
            raise ValidationError({"payment": [result.failure_reason]})

        order.submit(result.transaction_id)
        current_domain.repository_for(Order).add(order)

        cart.clear()
        current_domain.repository_for(Cart).add(cart)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            final_amount=breakdown.total,
            transaction_id=result.transaction_id,
        )
        return str(order.id)


def checkout_quote(customer_id, discount_code: str | None = None, donation_amount: float = 0.0) -> dict:
    """Order summary shown before payment: the same arithmetic the handler uses, nothing charged."""
    cart = current_domain.repository_for(Cart).for_customer(customer_id)
    if cart is None or cart.is_empty():
        raise ValidationError({"cart": ["Your cart is empty"]})

    lines = _priced_lines(cart)
    subtotal = sum(line["price"] * line["quantity"] for line in lines)
    delivery_fee = float(setting("DELIVERY_FEE"))

    discount = None
    if discount_code and discount_code.strip():
        discount = apply_code(discount_code, subtotal + delivery_fee)

    breakdown = price_breakdown(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        discount_amount=discount.discount_amount if discount and discount.success else 0.0,
        donation_amount=max(donation_amount or 0.0, 0.0),
    )
    return {
        "items": lines,
        "subtotal": breakdown.subtotal,
        "delivery_fee": breakdown.delivery_fee,
        "discount_amount": breakdown.discount_amount,
        "discount_message": discount.message if discount else None,
        "donation_amount": breakdown.donation_amount,
        "total": breakdown.total,
        "formatted_total": format_price(breakdown.total),
    }
