"""Order views for customers (order history) and sellers (their share of an order)."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.ordering.order.order import Order
from marketplace.shared.money import format_price


def order_summary(order: Order) -> dict:
    return {
        "order_id": str(order.id),
        "order_number": order.order_number,
        "customer_id": str(order.customer_id),
        "status": order.status,
        "payment_method": order.payment_method,
        "payment_status": order.payment_status,
        "transaction_id": order.transaction_id,
        "tracking_number": order.tracking_number,
        "total_amount": order.total_amount,
        "discount_code": order.discount_code,
        "discount_amount": order.discount_amount or 0.0,
        "donation_amount": order.donation_amount or 0.0,
        "charity_id": str(order.charity_id) if order.charity_id else None,
        "final_amount": order.final_amount,
        "formatted_total": format_price(order.final_amount),
        "shipping_address": order.shipping_address,
        "shipping_city": order.shipping_city,
        "phone": order.phone,
        "notes": order.notes,
        "created_at": order.created_at,
        "delivered_at": order.delivered_at,
        "items": [
            {
                "item_id": str(item.id),
                "product_id": str(item.product_id),
                "product_name": item.product_name,
                "seller_id": str(item.seller_id) if item.seller_id else None,
                "quantity": item.quantity,
                "price": item.price,
                "line_total": item.line_total,
            }
            for item in order.items
        ],
    }


def customer_orders(customer_id) -> list[dict]:
    return [order_summary(o) for o in current_domain.repository_for(Order).for_customer(customer_id)]


def customer_order(order_id, customer_id) -> dict:
    """One of the customer's orders; another customer's order is reported as missing."""
    order = current_domain.repository_for(Order).get(order_id)
    if str(order.customer_id) != str(customer_id):
        raise ObjectNotFoundError(f"Order {order_id} not found")
    return order_summary(order)


def shipping_city_of(order: Order) -> str:
    """Last comma-separated part of the shipping address, or "Unknown"."""
    if order.shipping_address:
        parts = [part.strip() for part in order.shipping_address.split(",") if part.strip()]
        if parts:
            return parts[-1]
    return "Unknown"


def seller_order_view(order: Order, seller_id) -> dict:
    items = order.items_for_seller(seller_id)
    return {
        "order_id": str(order.id),
        "order_number": order.order_number,
        "customer_id": str(order.customer_id),
        "status": order.status,
        "payment_status": order.payment_status,
        "tracking_number": order.tracking_number,
        "shipping_city": order.shipping_city or shipping_city_of(order),
        "created_at": order.created_at,
        "seller_total": order.seller_subtotal(seller_id),
        "items": [
            {
                "item_id": str(item.id),
                "product_id": str(item.product_id),
                "product_name": item.product_name,
                "quantity": item.quantity,
                "price": item.price,
                "line_total": item.line_total,
            }
            for item in items
        ],
    }
