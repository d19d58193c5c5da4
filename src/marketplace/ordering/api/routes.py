"""FastAPI endpoints for the shopper's cart, checkout, order history and returns."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.identity.api.dependencies import current_seller, current_user
from marketplace.identity.auth import AuthUser
from marketplace.identity.seller.seller import Seller
from marketplace.ordering.api.schemas import (
    AddToCartRequest,
    OrderPlacedResponse,
    PlaceOrderRequest,
    QuoteRequest,
    RequestReturnRequest,
    ResolveReturnRequest,
    ReturnIdResponse,
    StatusResponse,
    UpdateCartQuantityRequest,
)
from marketplace.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from marketplace.ordering.cart.view import cart_view
from marketplace.ordering.order.checkout import PlaceOrder, checkout_quote
from marketplace.ordering.order.history import customer_order, customer_orders
from marketplace.ordering.returns.handling import (
    RequestReturn,
    ResolveReturn,
    customer_returns,
    return_view,
    seller_returns,
)

cart_router = APIRouter(prefix="/carts", tags=["carts"])
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
return_router = APIRouter(prefix="/returns", tags=["returns"])


# --- Cart endpoints ---


@cart_router.get("/me")
def my_cart(user: AuthUser = Depends(current_user)) -> dict:
    return cart_view(user.id)


@cart_router.post("/me/items", status_code=201)
def add_to_cart(body: AddToCartRequest, user: AuthUser = Depends(current_user)) -> dict:
    command = AddToCart(customer_id=user.id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return cart_view(user.id)


@cart_router.put("/me/items/{product_id}")
def update_quantity(
    product_id: str, body: UpdateCartQuantityRequest, user: AuthUser = Depends(current_user)
) -> dict:
    command = UpdateCartQuantity(customer_id=user.id, product_id=product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return cart_view(user.id)


@cart_router.delete("/me/items/{product_id}")
def remove_from_cart(product_id: str, user: AuthUser = Depends(current_user)) -> dict:
    current_domain.process(RemoveFromCart(customer_id=user.id, product_id=product_id), asynchronous=False)
    return cart_view(user.id)


@cart_router.delete("/me", response_model=StatusResponse)
def clear_cart(user: AuthUser = Depends(current_user)) -> StatusResponse:
    current_domain.process(ClearCart(customer_id=user.id), asynchronous=False)
    return StatusResponse()


# --- Checkout endpoints ---


@checkout_router.post("/quote")
def quote(body: QuoteRequest, user: AuthUser = Depends(current_user)) -> dict:
    return checkout_quote(user.id, discount_code=body.discount_code, donation_amount=body.donation_amount)


@checkout_router.post("", status_code=201, response_model=OrderPlacedResponse)
def place_order(body: PlaceOrderRequest, user: AuthUser = Depends(current_user)) -> OrderPlacedResponse:
    command = PlaceOrder(
        customer_id=user.id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        phone=body.phone,
        address=body.address,
        city=body.city,
        state=body.state,
        postal_code=body.postal_code,
        notes=body.notes,
        payment_method=body.payment_method,
        payment_details=json.dumps(body.payment_details),
        discount_code=body.discount_code,
        donation_amount=body.donation_amount,
        charity_id=body.charity_id,
    )
    order_id = current_domain.process(command, asynchronous=False)
    summary = customer_order(order_id, user.id)
    return OrderPlacedResponse(
        order_id=summary["order_id"],
        order_number=summary["order_number"],
        transaction_id=summary["transaction_id"],
        final_amount=summary["final_amount"],
        formatted_total=summary["formatted_total"],
    )


# --- Order history ---


@order_router.get("")
def my_orders(user: AuthUser = Depends(current_user)) -> list[dict]:
    return customer_orders(user.id)


@order_router.get("/{order_id}")
def order_detail(order_id: str, user: AuthUser = Depends(current_user)) -> dict:
    return customer_order(order_id, user.id)


# --- Returns ---


@return_router.post("", status_code=201, response_model=ReturnIdResponse)
def request_return(body: RequestReturnRequest, user: AuthUser = Depends(current_user)) -> ReturnIdResponse:
    command = RequestReturn(
        customer_id=user.id,
        order_id=body.order_id,
        order_item_id=body.order_item_id,
        reason=body.reason,
        details=body.details,
    )
    result = current_domain.process(command, asynchronous=False)
    return ReturnIdResponse(return_id=result)


@return_router.get("")
def my_returns(user: AuthUser = Depends(current_user)) -> list[dict]:
    return [return_view(r) for r in customer_returns(user.id)]


@return_router.get("/seller")
def returns_for_my_store(seller: Seller = Depends(current_seller)) -> list[dict]:
    return [return_view(r) for r in seller_returns(seller.id)]


@return_router.put("/{return_id}/status", response_model=StatusResponse)
def resolve_return(
    return_id: str, body: ResolveReturnRequest, seller: Seller = Depends(current_seller)
) -> StatusResponse:
    command = ResolveReturn(return_id=return_id, seller_id=seller.id, status=body.status, notes=body.notes)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
