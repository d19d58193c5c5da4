"""FastAPI endpoints for discount codes."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.identity.api.dependencies import current_seller
from marketplace.identity.seller.seller import Seller
from marketplace.promotions.api.schemas import (
    ApplyDiscountRequest,
    CreateDiscountCodeRequest,
    DiscountApplicationResponse,
    DiscountCodeIdResponse,
    StatusResponse,
    UpdateDiscountCodeRequest,
)
from marketplace.promotions.application import apply_code
from marketplace.promotions.discount_code import DiscountCode
from marketplace.promotions.management import CreateDiscountCode, DeleteDiscountCode, UpdateDiscountCode
from marketplace.promotions.reports import active_codes, describe_code, discount_stats
from marketplace.shared.updates import update_fields

router = APIRouter(prefix="/discounts", tags=["discounts"])


@router.get("/active")
def storefront_codes() -> list[dict]:
    return active_codes()


@router.post("/apply", response_model=DiscountApplicationResponse)
def apply(body: ApplyDiscountRequest) -> DiscountApplicationResponse:
    result = apply_code(body.code, body.order_amount)
    return DiscountApplicationResponse(
        success=result.success,
        discount_amount=result.discount_amount,
        message=result.message,
        code=result.code,
    )


@router.get("", dependencies=[Depends(current_seller)])
def all_codes() -> list[dict]:
    return [describe_code(d) for d in current_domain.repository_for(DiscountCode).newest_first()]


@router.get("/stats", dependencies=[Depends(current_seller)])
def stats() -> dict:
    return discount_stats()


@router.post("", status_code=201, response_model=DiscountCodeIdResponse)
def create_code(body: CreateDiscountCodeRequest, seller: Seller = Depends(current_seller)) -> DiscountCodeIdResponse:
    command = CreateDiscountCode(seller_id=seller.id, **body.model_dump(exclude_none=True))
    result = current_domain.process(command, asynchronous=False)
    return DiscountCodeIdResponse(discount_code_id=result)


@router.put("/{discount_code_id}", response_model=StatusResponse)
def update_code(
    discount_code_id: str, body: UpdateDiscountCodeRequest, seller: Seller = Depends(current_seller)
) -> StatusResponse:
    command = UpdateDiscountCode(
        discount_code_id=discount_code_id,
        seller_id=seller.id,
        **update_fields(body),
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{discount_code_id}", response_model=StatusResponse)
def delete_code(discount_code_id: str, seller: Seller = Depends(current_seller)) -> StatusResponse:
    command = DeleteDiscountCode(discount_code_id=discount_code_id, seller_id=seller.id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
