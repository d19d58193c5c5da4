"""Product aggregate: a seller's listing on the storefront."""

from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from marketplace.catalogue.product.events import (
    ProductAdded,
    ProductImageChanged,
    ProductRemoved,
    ProductSold,
    ProductUpdated,
    ProductViewed,
)
from marketplace.config import setting
from marketplace.domain import marketplace

PLACEHOLDER_IMAGE_URL = "https://picsum.photos/600/600?random={product_id}"

_UNSET = object()


class StockLevel(Enum):
    OUT_OF_STOCK = "out_of_stock"
    LOW = "low"
    IN_STOCK = "in_stock"


def discount_percentage(price: float | None, original_price: float | None) -> int:
    """Whole-percent saving shown on a product card, 0 when there is none."""
    if not price or not original_price or original_price <= price:
        return 0
    return round((original_price - price) / original_price * 100)


def stock_level(stock_quantity: int | None) -> StockLevel:
    stock = stock_quantity or 0
    if stock == 0:
        return StockLevel.OUT_OF_STOCK
    if stock < int(setting("LOW_STOCK_THRESHOLD")):
        return StockLevel.LOW
    return StockLevel.IN_STOCK


@marketplace.aggregate
class Product:
    """Product aggregate root."""

    seller_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    category_id: Identifier()
    price: Float()
    original_price: Float()
    stock_quantity: Integer(default=0)
    image_url: String(max_length=1000)
    is_active: Boolean(default=True)
    views: Integer(default=0)
    sales_count: Integer(default=0)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def name_is_required(self):
        if not (self.name or "").strip():
            raise ValidationError({"name": ["Product name is required"]})

    @invariant.post
    def price_must_be_positive(self):
        if self.price is None or self.price <= 0:
            raise ValidationError({"price": ["Valid price is required"]})

    @invariant.post
    def original_price_must_be_positive(self):
        if self.original_price is not None and self.original_price <= 0:
            raise ValidationError({"original_price": ["Original price must be greater than 0"]})

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock_quantity is None or self.stock_quantity < 0:
            raise ValidationError({"stock_quantity": ["Valid stock quantity is required"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        seller_id,
        name,
        price,
        stock_quantity=0,
        description=None,
        category_id=None,
        original_price=None,
        image_url=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            seller_id=seller_id,
            name=name.strip() if name else name,
            description=description,
            category_id=category_id,
            price=price,
            original_price=original_price,
            stock_quantity=stock_quantity,
            image_url=image_url,
            is_active=True,
            views=0,
            sales_count=0,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                seller_id=str(seller_id),
                name=product.name,
                description=description,
                category_id=category_id,
                price=price,
                original_price=original_price,
                stock_quantity=stock_quantity,
                image_url=image_url,
                is_active=True,
                created_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Listing changes
    # -------------------------------------------------------------------
    def update(
        self,
        name=_UNSET,
        description=_UNSET,
        category_id=_UNSET,
        price=_UNSET,
        original_price=_UNSET,
        stock_quantity=_UNSET,
        image_url=_UNSET,
        is_active=_UNSET,
    ):
        """Change the given fields; passing ``None`` empties an optional field."""
        with atomic_change(self):
            if name is not _UNSET:
                self.name = name.strip() if name else name
            if description is not _UNSET:
                self.description = description
            if category_id is not _UNSET:
                self.category_id = category_id
            if price is not _UNSET:
                self.price = price
            if original_price is not _UNSET:
                self.original_price = original_price
            if stock_quantity is not _UNSET:
                self.stock_quantity = stock_quantity
            if image_url is not _UNSET:
                self.image_url = image_url
            if is_active is not _UNSET:
                self.is_active = bool(is_active)

        self.updated_at = datetime.now(UTC)
        self.raise_(ProductUpdated(**self._listing()))

    def remove(self):
        """Take the product off the storefront; its order history stays intact."""
        if not self.is_active:
            raise ValidationError({"is_active": ["Product has already been removed"]})

        self.is_active = False
        self.updated_at = datetime.now(UTC)
        self.raise_(ProductRemoved(product_id=str(self.id), seller_id=str(self.seller_id)))

    def change_image(self, image_url):
        self.image_url = image_url
        self.updated_at = datetime.now(UTC)
        self.raise_(ProductImageChanged(product_id=str(self.id), image_url=image_url))

    # -------------------------------------------------------------------
    # Storefront activity
    # -------------------------------------------------------------------
    def record_view(self):
        self.views = (self.views or 0) + 1
        self.raise_(ProductViewed(product_id=str(self.id), views=self.views))

    def record_sale(self, order_id, quantity):
        """Take ``quantity`` units out of stock for a placed order.

        Stock never goes below zero; an oversell is reported by the caller.
        """
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity sold must be at least 1"]})

        self.stock_quantity = max(0, (self.stock_quantity or 0) - quantity)
        self.sales_count = (self.sales_count or 0) + quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductSold(
                product_id=str(self.id),
                order_id=str(order_id),
                quantity=quantity,
                stock_quantity=self.stock_quantity,
                sales_count=self.sales_count,
            )
        )

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def discount_percentage(self) -> int:
        return discount_percentage(self.price, self.original_price)

    @property
    def stock_level(self) -> StockLevel:
        return stock_level(self.stock_quantity)

    @property
    def display_image_url(self) -> str:
        return self.image_url or PLACEHOLDER_IMAGE_URL.format(product_id=self.id)

    def _listing(self) -> dict:
        return {
            "product_id": str(self.id),
            "seller_id": str(self.seller_id),
            "name": self.name,
            "description": self.description,
            "category_id": self.category_id,
            "price": self.price,
            "original_price": self.original_price,
            "stock_quantity": self.stock_quantity,
            "image_url": self.image_url,
            "is_active": self.is_active,
        }
