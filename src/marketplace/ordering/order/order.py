"""Order aggregate: a paid-for cart on its way to the customer.

State Machine:
    PENDING → CONFIRMED | CANCELLED
    CONFIRMED → PROCESSING | CANCELLED
    PROCESSING → SHIPPED | CANCELLED
    SHIPPED → DELIVERED
    DELIVERED, CANCELLED → (terminal)

Payment status is tracked separately: card and wallet payments are paid at
checkout, cash on delivery stays pending until the order is delivered.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from marketplace.domain import marketplace
from marketplace.ordering.order.events import OrderPlaced, OrderStatusChanged
from marketplace.payments.methods import PaymentMethod
from marketplace.shared.money import round_amount


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


@marketplace.value_object(part_of="Order")
class ShippingDetails:
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(required=True, max_length=20)
    address = String(required=True, max_length=500)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(max_length=20)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def one_line(self) -> str:
        """``"address, city, state"`` with blank parts left out."""
        return ", ".join(part.strip() for part in (self.address, self.city, self.state) if part and part.strip())


@marketplace.entity(part_of="Order")
class OrderItem:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    seller_id = Identifier()
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return round_amount(self.price * self.quantity)


@marketplace.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderItem)
    shipping = ValueObject(ShippingDetails)
    shipping_address = String(max_length=700)
    shipping_city = String(max_length=100)
    phone = String(max_length=20)
    notes = Text()

    total_amount = Float(required=True, min_value=0.0)
    delivery_fee = Float(default=0.0)
    discount_code = String(max_length=50)
    discount_code_id = Identifier()
    discount_amount = Float(default=0.0)
    donation_amount = Float(default=0.0)
    charity_id = Identifier()
    final_amount = Float(required=True, min_value=0.0)

    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_method = String(choices=PaymentMethod, required=True)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    transaction_id = String(max_length=100)
    tracking_number = String(max_length=100)
    delivered_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def draft(
        cls,
        customer_id,
        items,
        shipping,
        payment_method,
        total_amount,
        final_amount,
        delivery_fee=0.0,
        discount_code=None,
        discount_code_id=None,
        discount_amount=0.0,
        donation_amount=0.0,
        charity_id=None,
        notes=None,
    ):
        """Build and validate an order from priced lines without placing it.

        ``items`` is a list of dicts with product_id, product_name, seller_id,
        quantity and price.
        """
        now = datetime.now(UTC)
        return cls(
            customer_id=customer_id,
            items=[OrderItem(**item) for item in items],
            shipping=shipping,
            shipping_address=shipping.one_line,
            shipping_city=shipping.city,
            phone=shipping.phone,
            notes=notes,
            total_amount=total_amount,
            delivery_fee=delivery_fee,
            discount_code=discount_code,
            discount_code_id=discount_code_id,
            discount_amount=discount_amount,
            donation_amount=donation_amount,
            charity_id=charity_id,
            final_amount=final_amount,
            status=OrderStatus.PENDING.value,
            payment_method=PaymentMethod(payment_method).value,
            payment_status=PaymentStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def place(cls, transaction_id=None, **details):
        order = cls.draft(**details)
        order.submit(transaction_id)
        return order

    def submit(self, transaction_id=None):
        """Place a drafted order once its payment has gone through."""
        if self.payment_method != PaymentMethod.COD.value:
            self.payment_status = PaymentStatus.PAID.value
        self.transaction_id = transaction_id
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            OrderPlaced(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                items=json.dumps(
                    [
                        {
                            "product_id": str(item.product_id),
                            "seller_id": str(item.seller_id) if item.seller_id else None,
                            "quantity": item.quantity,
                            "price": item.price,
                        }
                        for item in self.items
                    ]
                ),
                total_amount=self.total_amount,
                discount_code=self.discount_code,
                discount_code_id=self.discount_code_id,
                discount_amount=self.discount_amount,
                donation_amount=self.donation_amount,
                charity_id=self.charity_id,
                final_amount=self.final_amount,
                payment_method=self.payment_method,
                payment_status=self.payment_status,
                transaction_id=transaction_id,
                placed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Fulfilment
    # -------------------------------------------------------------------
    def change_status(self, new_status, tracking_number=None):
        current = OrderStatus(self.status)
        target = OrderStatus(new_status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot change order status from {current.value} to {target.value}"]})

        now = datetime.now(UTC)
        self.status = target.value
        if tracking_number:
            self.tracking_number = tracking_number
        if target == OrderStatus.DELIVERED:
            self.delivered_at = now
            if self.payment_method == PaymentMethod.COD.value:
                self.payment_status = PaymentStatus.PAID.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                previous_status=current.value,
                new_status=target.value,
                tracking_number=self.tracking_number,
                changed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def order_number(self) -> str:
        return str(self.id)[:8].upper()

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def items_for_seller(self, seller_id) -> list[OrderItem]:
        return [item for item in self.items if str(item.seller_id) == str(seller_id)]

    def seller_subtotal(self, seller_id) -> float:
        return round_amount(sum(item.line_total for item in self.items_for_seller(seller_id)))

    def find_item(self, item_id) -> OrderItem | None:
        return next((item for item in self.items if str(item.id) == str(item_id)), None)
