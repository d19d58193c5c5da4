"""Product card: the storefront's listing and search projection."""

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product.events import (
    ProductAdded,
    ProductImageChanged,
    ProductRemoved,
    ProductSold,
    ProductUpdated,
    ProductViewed,
)
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace


@marketplace.projection
class ProductCard:
    product_id: Identifier(identifier=True, required=True)
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    category_id: Identifier()
    price: Float(required=True)
    original_price: Float()
    stock_quantity: Integer(default=0)
    image_url: String(max_length=1000)
    is_active: Boolean(default=True)
    views: Integer(default=0)
    sales_count: Integer(default=0)
    created_at: DateTime()


_LISTING_FIELDS = (
    "seller_id",
    "name",
    "description",
    "category_id",
    "price",
    "original_price",
    "stock_quantity",
    "image_url",
    "is_active",
)


@marketplace.projector(projector_for=ProductCard, aggregates=[Product])
class ProductCardProjector:
    @on(ProductAdded)
    def on_product_added(self, event):
        current_domain.repository_for(ProductCard).add(
            ProductCard(
                product_id=event.product_id,
                views=0,
                sales_count=0,
                created_at=event.created_at,
                **{name: getattr(event, name) for name in _LISTING_FIELDS},
            )
        )

    @on(ProductUpdated)
    def on_product_updated(self, event):
        repo = current_domain.repository_for(ProductCard)
        card = repo.get(event.product_id)
        for name in _LISTING_FIELDS:
            setattr(card, name, getattr(event, name))
        repo.add(card)

    @on(ProductRemoved)
    def on_product_removed(self, event):
        repo = current_domain.repository_for(ProductCard)
        try:
            card = repo.get(event.product_id)
        except ObjectNotFoundError:
            return
        card.is_active = False
        repo.add(card)

    @on(ProductImageChanged)
    def on_image_changed(self, event):
        repo = current_domain.repository_for(ProductCard)
        card = repo.get(event.product_id)
        card.image_url = event.image_url
        repo.add(card)

    @on(ProductSold)
    def on_product_sold(self, event):
        repo = current_domain.repository_for(ProductCard)
        card = repo.get(event.product_id)
        card.stock_quantity = event.stock_quantity
        card.sales_count = event.sales_count
        repo.add(card)

    @on(ProductViewed)
    def on_product_viewed(self, event):
        repo = current_domain.repository_for(ProductCard)
        card = repo.get(event.product_id)
        card.views = event.views
        repo.add(card)
