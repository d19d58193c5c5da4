"""Domain events for the Product aggregate.

``ProductAdded`` and ``ProductUpdated`` carry the full listing so the
storefront projection can be rebuilt from them alone.
"""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductAdded:
    """A seller listed a new product."""

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    name: String(required=True)
    description: Text()
    category_id: Identifier()
    price: Float(required=True)
    original_price: Float()
    stock_quantity: Integer(required=True)
    image_url: String()
    is_active: Boolean(required=True)
    created_at: DateTime(required=True)


@marketplace.event(part_of="Product")
class ProductUpdated:
    """A seller edited a product's listing."""

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    name: String(required=True)
    description: Text()
    category_id: Identifier()
    price: Float(required=True)
    original_price: Float()
    stock_quantity: Integer(required=True)
    image_url: String()
    is_active: Boolean(required=True)


@marketplace.event(part_of="Product")
class ProductRemoved:
    """A seller took a product off the storefront."""

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)


@marketplace.event(part_of="Product")
class ProductImageChanged:
    product_id: Identifier(required=True)
    image_url: String(required=True)


@marketplace.event(part_of="Product")
class ProductSold:
    """Units of the product were bought in an order."""

    product_id: Identifier(required=True)
    order_id: Identifier(required=True)
    quantity: Integer(required=True)
    stock_quantity: Integer(required=True)
    sales_count: Integer(required=True)


@marketplace.event(part_of="Product")
class ProductViewed:
    product_id: Identifier(required=True)
    views: Integer(required=True)
