"""FastAPI endpoints for authentication and seller accounts."""

import json

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from protean.utils.globals import current_domain

from marketplace.catalogue.product.images import upload_product_image
from marketplace.catalogue.product.listing import AddProduct, RemoveProduct, UpdateProduct
from marketplace.dashboard.seller_dashboard import load_dashboard, product_view, seller_products, seller_view
from marketplace.identity.api.dependencies import bearer_token, current_seller, current_user
from marketplace.identity.api.schemas import (
    AddProductRequest,
    ImageUrlResponse,
    ProductIdResponse,
    RegisterSellerRequest,
    SellerIdResponse,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
    StatusResponse,
    UpdateOrderStatusRequest,
    UpdateProductRequest,
    UpdateSellerProfileRequest,
    UpdateStoreSettingsRequest,
    UserResponse,
)
from marketplace.identity.auth import AuthUser, get_auth_gateway
from marketplace.identity.auth.port import credential_problem
from marketplace.identity.seller.profile import UpdateSellerProfile, UpdateStoreSettings, VerifySeller
from marketplace.identity.seller.registration import RegisterSeller
from marketplace.identity.seller.seller import Seller
from marketplace.ordering.order.fulfillment import UpdateOrderStatus
from marketplace.shared.updates import update_fields

auth_router = APIRouter(prefix="/auth", tags=["auth"])
seller_router = APIRouter(prefix="/sellers", tags=["sellers"])


# --- Auth endpoints ---


@auth_router.post("/signup", status_code=201, response_model=SessionResponse)
def sign_up(body: SignUpRequest) -> SessionResponse:
    problem = credential_problem(body.email, body.password)
    if problem:
        raise HTTPException(status_code=400, detail=problem)

    result = get_auth_gateway().sign_up(body.email, body.password, body.full_name)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)
    return SessionResponse(
        user_id=result.user.id,
        email=result.user.email,
        full_name=result.user.full_name,
        access_token=result.access_token,
    )


@auth_router.post("/signin", response_model=SessionResponse)
def sign_in(body: SignInRequest) -> SessionResponse:
    result = get_auth_gateway().sign_in(body.email, body.password)
    if not result.success:
        raise HTTPException(status_code=401, detail=result.error)
    return SessionResponse(
        user_id=result.user.id,
        email=result.user.email,
        full_name=result.user.full_name,
        access_token=result.access_token,
    )


@auth_router.get("/me", response_model=UserResponse)
def me(user: AuthUser = Depends(current_user)) -> UserResponse:
    seller = current_domain.repository_for(Seller).find_by_user(user.id)
    return UserResponse(
        user_id=user.id,
        email=user.email,
        full_name=user.full_name,
        seller_id=str(seller.id) if seller else None,
    )


@auth_router.post("/signout", response_model=StatusResponse)
def sign_out(authorization: str | None = Header(default=None)) -> StatusResponse:
    token = bearer_token(authorization)
    if token:
        get_auth_gateway().sign_out(token)
    return StatusResponse()


# --- Seller account endpoints ---


@seller_router.post("", status_code=201, response_model=SellerIdResponse)
def register_seller(body: RegisterSellerRequest, user: AuthUser = Depends(current_user)) -> SellerIdResponse:
    command = RegisterSeller(
        user_id=user.id,
        email=user.email,
        full_name=body.full_name,
        business_name=body.business_name,
        phone=body.phone,
        address=body.address,
        city=body.city,
        business_type=body.business_type,
        tax_id=body.tax_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return SellerIdResponse(seller_id=result)


@seller_router.get("/me")
def my_profile(seller: Seller = Depends(current_seller)) -> dict:
    return seller_view(seller)


@seller_router.put("/me", response_model=StatusResponse)
def update_profile(body: UpdateSellerProfileRequest, seller: Seller = Depends(current_seller)) -> StatusResponse:
    command = UpdateSellerProfile(seller_id=seller.id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@seller_router.get("/me/settings")
def store_settings(seller: Seller = Depends(current_seller)) -> dict:
    return seller.store_settings.to_dict()


@seller_router.put("/me/settings", response_model=StatusResponse)
def update_settings(body: UpdateStoreSettingsRequest, seller: Seller = Depends(current_seller)) -> StatusResponse:
    changes = body.model_dump(exclude_none=True)
    if "shipping_zones" in changes:
        changes["shipping_zones"] = json.dumps(changes["shipping_zones"])
    current_domain.process(UpdateStoreSettings(seller_id=seller.id, **changes), asynchronous=False)
    return StatusResponse()


@seller_router.get("/me/dashboard")
def dashboard(seller: Seller = Depends(current_seller)) -> dict:
    return load_dashboard(seller.id)


@seller_router.put("/{seller_id}/verify", response_model=StatusResponse)
def verify_seller(seller_id: str, seller: Seller = Depends(current_seller)) -> StatusResponse:
    if str(seller.id) == seller_id:
        raise HTTPException(status_code=403, detail="A store cannot verify itself")
    current_domain.process(VerifySeller(seller_id=seller_id), asynchronous=False)
    return StatusResponse()


# --- Seller product endpoints ---


@seller_router.get("/me/products")
def my_products(include_inactive: bool = False, seller: Seller = Depends(current_seller)) -> list[dict]:
    return [product_view(p) for p in seller_products(seller.id, include_inactive=include_inactive)]


@seller_router.post("/me/products", status_code=201, response_model=ProductIdResponse)
def add_product(body: AddProductRequest, seller: Seller = Depends(current_seller)) -> ProductIdResponse:
    command = AddProduct(
        seller_id=seller.id,
        name=body.name,
        description=body.description,
        category_id=body.category_id,
        price=body.price,
        original_price=body.original_price,
        stock_quantity=body.stock_quantity,
        image_url=body.image_url,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@seller_router.put("/me/products/{product_id}", response_model=StatusResponse)
def update_product(
    product_id: str, body: UpdateProductRequest, seller: Seller = Depends(current_seller)
) -> StatusResponse:
    command = UpdateProduct(product_id=product_id, seller_id=seller.id, **update_fields(body))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@seller_router.delete("/me/products/{product_id}", response_model=StatusResponse)
def remove_product(product_id: str, seller: Seller = Depends(current_seller)) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id, seller_id=seller.id), asynchronous=False)
    return StatusResponse()


@seller_router.post("/me/images", status_code=201, response_model=ImageUrlResponse)
async def upload_image(
    request: Request,
    filename: str | None = Query(None, max_length=255),
    product_id: str | None = Query(None),
    seller: Seller = Depends(current_seller),
) -> ImageUrlResponse:
    """Upload the raw request body as a product photo.

    With ``product_id`` the photo also replaces that product's image.
    """
    data = await request.body()
    if not data:
        raise HTTPException(status_code=400, detail="Please choose an image to upload")

    url = await run_in_threadpool(
        upload_product_image,
        data,
        request.headers.get("content-type", ""),
        filename=filename,
        product_id=product_id,
        seller_id=seller.id,
    )
    return ImageUrlResponse(image_url=url)


# --- Seller order endpoints ---


@seller_router.put("/me/orders/{order_id}/status", response_model=StatusResponse)
def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, seller: Seller = Depends(current_seller)
) -> StatusResponse:
    command = UpdateOrderStatus(
        order_id=order_id,
        seller_id=seller.id,
        status=body.status,
        tracking_number=body.tracking_number,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
