"""FastAPI endpoints for charities, monetary donations and goods donations."""

import base64
import binascii
import json

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from marketplace.charity.api.schemas import (
    CharityIdResponse,
    DonationResultResponse,
    GoodsDonationIdResponse,
    MakeDonationRequest,
    RegisterCharityRequest,
    RejectCharityRequest,
    SchedulePickupRequest,
    StatusResponse,
    SubmitGoodsDonationRequest,
    UpdateCharityRequest,
    UpdateGoodsStatusRequest,
)
from marketplace.charity.charity.management import (
    DeleteCharity,
    RegisterCharity,
    RejectCharity,
    UpdateCharity,
    VerifyCharity,
)
from marketplace.charity.donation.giving import process_donation
from marketplace.charity.goods.handling import DeleteGoodsDonation, ScheduleGoodsPickup, UpdateGoodsDonationStatus
from marketplace.charity.goods.queries import all_donations, donor_donations, goods_donation_stats, goods_view
from marketplace.charity.goods.submission import DonationPhoto, submit_goods_donation
from marketplace.charity.impact import (
    charity_stats,
    donation_stats,
    donation_view,
    impact_summary,
    list_charities,
    user_donations,
)
from marketplace.identity.api.dependencies import current_seller, current_user
from marketplace.identity.auth import AuthUser

charity_router = APIRouter(prefix="/charities", tags=["charities"])
donation_router = APIRouter(prefix="/donations", tags=["donations"])
goods_router = APIRouter(prefix="/goods-donations", tags=["goods-donations"])


# --- Charity endpoints ---


@charity_router.get("")
def charities(category: str | None = None, include_inactive: bool = False) -> list[dict]:
    return list_charities(category=category, active_only=not include_inactive)


@charity_router.get("/impact")
def impact(category: str | None = None) -> dict:
    return impact_summary(category=category)


@charity_router.get("/{charity_id}")
def charity_detail(charity_id: str) -> dict:
    return charity_stats(charity_id)


@charity_router.post("", status_code=201, response_model=CharityIdResponse)
def register_charity(body: RegisterCharityRequest, user: AuthUser = Depends(current_user)) -> CharityIdResponse:
    command = RegisterCharity(created_by=user.id, **body.model_dump(exclude_none=True))
    result = current_domain.process(command, asynchronous=False)
    return CharityIdResponse(charity_id=result)


@charity_router.put("/{charity_id}", response_model=StatusResponse, dependencies=[Depends(current_seller)])
def update_charity(charity_id: str, body: UpdateCharityRequest) -> StatusResponse:
    command = UpdateCharity(charity_id=charity_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@charity_router.delete("/{charity_id}", response_model=StatusResponse, dependencies=[Depends(current_seller)])
def delete_charity(charity_id: str) -> StatusResponse:
    current_domain.process(DeleteCharity(charity_id=charity_id), asynchronous=False)
    return StatusResponse()


@charity_router.put("/{charity_id}/verify", response_model=StatusResponse, dependencies=[Depends(current_seller)])
def verify_charity(charity_id: str) -> StatusResponse:
    current_domain.process(VerifyCharity(charity_id=charity_id), asynchronous=False)
    return StatusResponse()


@charity_router.put("/{charity_id}/reject", response_model=StatusResponse, dependencies=[Depends(current_seller)])
def reject_charity(charity_id: str, body: RejectCharityRequest) -> StatusResponse:
    current_domain.process(RejectCharity(charity_id=charity_id, reason=body.reason), asynchronous=False)
    return StatusResponse()


# --- Monetary donations ---


@donation_router.post("", status_code=201, response_model=DonationResultResponse)
def donate(body: MakeDonationRequest, user: AuthUser = Depends(current_user)) -> DonationResultResponse:
    result = process_donation(
        user_id=user.id,
        charity_id=body.charity_id,
        amount=body.amount,
        payment_method=body.payment_method,
        payment_details=json.dumps(body.payment_details),
        anonymous=body.anonymous,
        message=body.message,
    )
    return DonationResultResponse(success=result.success, donation_id=result.donation_id, message=result.message)


@donation_router.get("/mine")
def my_donations(user: AuthUser = Depends(current_user)) -> list[dict]:
    return [donation_view(d) for d in user_donations(user.id)]


@donation_router.get("/stats")
def stats() -> dict:
    return donation_stats()


# --- Goods donations ---


def _decode_photos(uploads) -> list[DonationPhoto]:
    photos = []
    for upload in uploads:
        try:
            data = base64.b64decode(upload.data, validate=True)
        except binascii.Error:
            raise HTTPException(status_code=400, detail=f"{upload.filename} is not valid base64 data") from None
        photos.append(DonationPhoto(filename=upload.filename, content_type=upload.content_type, data=data))
    return photos


@goods_router.post("", status_code=201, response_model=GoodsDonationIdResponse)
def submit_goods(body: SubmitGoodsDonationRequest, user: AuthUser = Depends(current_user)) -> GoodsDonationIdResponse:
    fields = body.model_dump(exclude={"images"})
    donation_id = submit_goods_donation(photos=_decode_photos(body.images), donor_id=user.id, **fields)
    return GoodsDonationIdResponse(donation_id=donation_id)


@goods_router.get("/mine")
def my_goods_donations(user: AuthUser = Depends(current_user)) -> list[dict]:
    return [goods_view(d) for d in donor_donations(user.id)]


@goods_router.get("", dependencies=[Depends(current_seller)])
def goods_donations(status: str | None = None, category: str | None = None) -> list[dict]:
    return [goods_view(d) for d in all_donations(status=status, category=category)]


@goods_router.get("/stats", dependencies=[Depends(current_seller)])
def goods_stats() -> dict:
    return goods_donation_stats()


@goods_router.put("/{donation_id}/status", response_model=StatusResponse, dependencies=[Depends(current_seller)])
def update_goods_status(donation_id: str, body: UpdateGoodsStatusRequest) -> StatusResponse:
    command = UpdateGoodsDonationStatus(donation_id=donation_id, status=body.status, admin_notes=body.admin_notes)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@goods_router.put("/{donation_id}/pickup", response_model=StatusResponse, dependencies=[Depends(current_seller)])
def schedule_pickup(donation_id: str, body: SchedulePickupRequest) -> StatusResponse:
    command = ScheduleGoodsPickup(
        donation_id=donation_id,
        pickup_date=body.pickup_date,
        pickup_time=body.pickup_time,
        admin_notes=body.admin_notes,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@goods_router.delete("/{donation_id}", response_model=StatusResponse)
def delete_goods_donation(donation_id: str, user: AuthUser = Depends(current_user)) -> StatusResponse:
    current_domain.process(DeleteGoodsDonation(donation_id=donation_id, donor_id=user.id), asynchronous=False)
    return StatusResponse()
