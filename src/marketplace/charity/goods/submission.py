"""Offering goods for donation: command, handler and photo uploads."""

import json
import time
from dataclasses import dataclass

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Date, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.charity.goods.goods_donation import GoodsDonation
from marketplace.config import setting
from marketplace.domain import marketplace
from marketplace.storage import StorageError, StorageGateway, get_storage

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DonationPhoto:
    filename: str
    content_type: str
    data: bytes


@marketplace.command(part_of="GoodsDonation")
class SubmitGoodsDonation:
    donor_id = Identifier()
    product_name = String(max_length=255)
    description = Text()
    condition = String(required=True, max_length=50)
    category = String(required=True, max_length=50)
    estimated_value = Float(default=0.0)
    quantity = Integer(default=1)
    donor_name = String(max_length=200)
    donor_email = String(max_length=254)
    donor_phone = String(max_length=20)
    pickup_address = String(max_length=500)
    pickup_city = String(max_length=100)
    preferred_pickup_date = Date()
    additional_notes = Text()
    image_urls = Text()  # JSON array of public URLs


@marketplace.command_handler(part_of=GoodsDonation)
class SubmitGoodsDonationHandler:
    @handle(SubmitGoodsDonation)
    def submit(self, command):
        if not command.donor_id:
            raise ValidationError({"donor_id": ["You need to be logged in to donate goods"]})

        donation = GoodsDonation.submit(
            donor_id=command.donor_id,
            product_name=command.product_name,
            description=command.description,
            condition=command.condition,
            category=command.category,
            estimated_value=command.estimated_value,
            quantity=command.quantity,
            donor_name=command.donor_name,
            donor_email=command.donor_email,
            donor_phone=command.donor_phone,
            pickup_address=command.pickup_address,
            pickup_city=command.pickup_city,
            preferred_pickup_date=command.preferred_pickup_date,
            additional_notes=command.additional_notes,
            image_urls=json.loads(command.image_urls) if command.image_urls else [],
        )
        current_domain.repository_for(GoodsDonation).add(donation)
        return str(donation.id)


def upload_donation_photos(photos: list[DonationPhoto], storage: StorageGateway | None = None) -> list[str]:
    """Upload photos to ``donations/<millis>-<name>``; photos that fail are skipped."""
    storage = storage or get_storage()
    urls = []
    for photo in photos:
        if not photo.content_type.startswith("image/"):
            logger.warning("donation_photo_skipped", filename=photo.filename, reason="not an image")
            continue
        path = f"donations/{int(time.time() * 1000)}-{photo.filename}"
        try:
            urls.append(storage.upload(setting("PRODUCT_IMAGE_BUCKET"), path, photo.data, photo.content_type))
        except StorageError as exc:
            logger.warning("donation_photo_skipped", filename=photo.filename, reason=str(exc))
    return urls


def submit_goods_donation(photos: list[DonationPhoto] | None = None, **fields) -> str:
    """Upload the donor's photos, then record the donation with the ones that made it."""
    if not fields.get("donor_id"):
        raise ValidationError({"donor_id": ["You need to be logged in to donate goods"]})

    urls = upload_donation_photos(photos or [])
    command = SubmitGoodsDonation(image_urls=json.dumps(urls), **fields)
    return current_domain.process(command, asynchronous=False)
