"""Storefront reads: product listings, search, categories and headline stats.

Listings come from the ``ProductCard`` projection and only ever show active
products, newest first.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import PLACEHOLDER_IMAGE_URL, discount_percentage, stock_level
from marketplace.catalogue.projections.product_card import ProductCard
from marketplace.ordering.order.order import Order
from marketplace.shared.money import format_price


def card_view(card: ProductCard, category_names: dict | None = None) -> dict:
    return {
        "product_id": str(card.product_id),
        "seller_id": str(card.seller_id),
        "name": card.name,
        "description": card.description,
        "category_id": card.category_id,
        "category_name": (category_names or {}).get(str(card.category_id)) if card.category_id else None,
        "price": card.price,
        "formatted_price": format_price(card.price),
        "original_price": card.original_price,
        "discount_percentage": discount_percentage(card.price, card.original_price),
        "stock_quantity": card.stock_quantity,
        "stock_level": stock_level(card.stock_quantity).value,
        "image_url": card.image_url or PLACEHOLDER_IMAGE_URL.format(product_id=card.product_id),
        "views": card.views or 0,
        "sales_count": card.sales_count or 0,
        "created_at": card.created_at,
    }


def _category_names() -> dict:
    return {str(c.id): c.name for c in current_domain.repository_for(Category)._dao.query.limit(None).all().items}


def _active_cards() -> list[ProductCard]:
    query = current_domain.repository_for(ProductCard)._dao.query.filter(is_active=True).order_by("-created_at")
    return query.limit(None).all().items


def _matches(card: ProductCard, term: str) -> bool:
    return term in (card.name or "").lower() or term in (card.description or "").lower()


def list_products(search: str | None = None, category_id=None, limit: int | None = None) -> list[dict]:
    """Active products, newest first, optionally narrowed by a search term or category."""
    cards = _active_cards()
    if category_id:
        cards = [c for c in cards if str(c.category_id) == str(category_id)]
    term = (search or "").strip().lower()
    if term:
        cards = [c for c in cards if _matches(c, term)]
    if limit:
        cards = cards[:limit]

    names = _category_names()
    return [card_view(c, names) for c in cards]


def get_product(product_id) -> dict:
    """One active product; inactive and unknown products are both reported as not found."""
    try:
        card = current_domain.repository_for(ProductCard).get(product_id)
    except ObjectNotFoundError:
        card = None
    if card is None or not card.is_active:
        raise ObjectNotFoundError(f"Product {product_id} not found")
    return card_view(card, _category_names())


def list_categories(search: str | None = None) -> list[dict]:
    """Active categories by name, each with its number of active products."""
    counts = {}
    for card in _active_cards():
        if card.category_id:
            counts[str(card.category_id)] = counts.get(str(card.category_id), 0) + 1

    term = (search or "").strip().lower()
    categories = [
        c
        for c in current_domain.repository_for(Category)._dao.query.limit(None).all().items
        if c.is_active and (not term or term in c.name.lower() or term in (c.description or "").lower())
    ]
    return [
        {
            "category_id": str(c.id),
            "name": c.name,
            "slug": c.slug,
            "description": c.description,
            "image_url": c.image_url,
            "product_count": counts.get(str(c.id), 0),
        }
        for c in sorted(categories, key=lambda c: c.name.lower())
    ]


def get_category(category_id) -> dict:
    category = current_domain.repository_for(Category).get(category_id)
    if not category.is_active:
        raise ObjectNotFoundError(f"Category {category_id} not found")
    return {
        "category_id": str(category.id),
        "name": category.name,
        "slug": category.slug,
        "description": category.description,
        "image_url": category.image_url,
        "products": list_products(category_id=category.id),
    }


def storefront_stats() -> dict:
    return {
        "total_products": current_domain.repository_for(ProductCard)._dao.query.filter(is_active=True).all().total,
        "total_categories": current_domain.repository_for(Category)._dao.query.filter(is_active=True).all().total,
        "total_orders": current_domain.repository_for(Order).count(),
    }
