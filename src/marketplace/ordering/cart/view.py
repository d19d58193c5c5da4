"""The cart as the shopper sees it, joined with current catalogue data."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.ordering.cart.cart import Cart
from marketplace.shared.money import format_price, round_amount


def cart_lines(cart: Cart | None) -> list[dict]:
    """Cart lines with product name, price and stock; vanished products are left out."""
    if cart is None:
        return []

    products = current_domain.repository_for(Product)
    lines = []
    for item in sorted(cart.items, key=lambda i: i.added_at):
        try:
            product = products.get(item.product_id)
        except ObjectNotFoundError:
            continue
        lines.append(
            {
                "product_id": str(item.product_id),
                "quantity": item.quantity,
                "name": product.name,
                "price": product.price,
                "image_url": product.display_image_url,
                "stock_quantity": product.stock_quantity,
                "seller_id": str(product.seller_id),
                "is_active": product.is_active,
                "line_total": round_amount(product.price * item.quantity),
            }
        )
    return lines


def cart_view(customer_id) -> dict:
    cart = current_domain.repository_for(Cart).for_customer(customer_id)
    lines = cart_lines(cart)
    total_price = round_amount(sum(line["line_total"] for line in lines))
    return {
        "cart_id": str(cart.id) if cart else None,
        "customer_id": str(customer_id),
        "items": lines,
        "total_items": sum(line["quantity"] for line in lines),
        "total_price": total_price,
        "formatted_total": format_price(total_price),
    }
