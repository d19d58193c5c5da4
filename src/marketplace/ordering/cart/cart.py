"""Cart aggregate: the products a signed-in customer intends to buy.

A customer has one cart. Lines are keyed by product: adding a product that
is already in the cart raises that line's quantity, and setting a line's
quantity to zero or less removes it. Prices are not stored; they are read
from the catalogue when the cart is shown and again at checkout.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from marketplace.domain import marketplace
from marketplace.ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated


@marketplace.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@marketplace.aggregate
class Cart:
    customer_id = Identifier(required=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    def line_for(self, product_id) -> CartItem | None:
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add_item(self, product_id, quantity=1):
        """Add ``quantity`` of a product, merging with an existing line."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        existing = self.line_for(product_id)
        if existing:
            existing.quantity += quantity
            line_quantity = existing.quantity
        else:
            self.add_items(CartItem(product_id=product_id, quantity=quantity, added_at=now))
            line_quantity = quantity

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=line_quantity,
            )
        )

    def update_quantity(self, product_id, quantity):
        """Set a line's quantity; zero or less removes the line."""
        item = self.line_for(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Item not found in cart"]})

        if quantity <= 0:
            self.remove_item(product_id)
            return

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        item = self.line_for(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Item not found in cart"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                customer_id=str(self.customer_id),
                product_id=str(product_id),
            )
        )

    def clear(self):
        removed = len(self.items)
        for item in list(self.items):
            self.remove_items(item)

        self.updated_at = datetime.now(UTC)
        self.raise_(CartCleared(cart_id=str(self.id), customer_id=str(self.customer_id), items_removed=removed))

    @property
    def total_items(self) -> int:
        return sum(i.quantity for i in self.items)

    def is_empty(self) -> bool:
        return not self.items
