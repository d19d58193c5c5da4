"""Everything the seller dashboard shows on load."""

from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.dashboard.analytics import seller_analytics
from marketplace.identity.seller.seller import Seller
from marketplace.ordering.order.history import seller_order_view
from marketplace.ordering.order.order import Order


def seller_products(seller_id, include_inactive: bool = False) -> list[Product]:
    """The seller's products, newest first."""
    query = current_domain.repository_for(Product)._dao.query.filter(seller_id=str(seller_id))
    if not include_inactive:
        query = query.filter(is_active=True)
    return query.order_by("-created_at").limit(None).all().items


def product_view(product: Product) -> dict:
    return {
        "product_id": str(product.id),
        "name": product.name,
        "description": product.description,
        "category_id": product.category_id,
        "price": product.price,
        "original_price": product.original_price,
        "discount_percentage": product.discount_percentage,
        "stock_quantity": product.stock_quantity,
        "stock_level": product.stock_level.value,
        "image_url": product.display_image_url,
        "is_active": product.is_active,
        "views": product.views or 0,
        "sales_count": product.sales_count or 0,
        "created_at": product.created_at,
    }


def seller_view(seller: Seller) -> dict:
    return {
        "seller_id": str(seller.id),
        "user_id": str(seller.user_id),
        "email": seller.email,
        "full_name": seller.full_name,
        "business_name": seller.business_name,
        "phone": seller.phone,
        "address": seller.address,
        "city": seller.city,
        "business_type": seller.business_type,
        "tax_id": seller.tax_id,
        "is_verified": seller.is_verified,
    }


def load_dashboard(seller_id) -> dict:
    """Profile, settings, products, orders and analytics for one seller."""
    seller = current_domain.repository_for(Seller).get(seller_id)
    products = seller_products(seller_id)
    orders = current_domain.repository_for(Order).for_seller(seller_id)

    return {
        "seller": seller_view(seller),
        "settings": seller.store_settings.to_dict(),
        "products": [product_view(p) for p in products],
        "orders": [seller_order_view(o, seller_id) for o in orders],
        "analytics": seller_analytics(seller_id, products, orders),
    }
