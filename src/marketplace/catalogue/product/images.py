"""Product photo uploads.

Photos go to the ``product-images`` bucket of the external object storage.
When the upload belongs to an existing product, its listing is pointed at
the new public URL straight away; a seller filling in a new listing gets
the URL back and submits it with the product.
"""

import time

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from marketplace.catalogue.product.listing import ChangeProductImage
from marketplace.config import setting
from marketplace.storage import StorageError, StorageGateway, get_storage

logger = structlog.get_logger(__name__)


def validate_image(content_type: str | None, size: int) -> None:
    if not (content_type or "").startswith("image/"):
        raise ValidationError({"file": ["Please upload an image file (JPEG, PNG, WebP)"]})
    max_bytes = int(setting("MAX_IMAGE_BYTES"))
    if size > max_bytes:
        raise ValidationError({"file": [f"Please upload an image smaller than {max_bytes // (1024 * 1024)}MB"]})


def image_path(filename: str | None, content_type: str, product_id=None, millis: int | None = None) -> str:
    """``product-images/<product id or "product">-<epoch millis>.<ext>``."""
    if filename and "." in filename:
        extension = filename.rsplit(".", 1)[-1].lower()
    else:
        extension = content_type.split("/", 1)[-1]
    stamp = millis if millis is not None else int(time.time() * 1000)
    return f"product-images/{product_id or 'product'}-{stamp}.{extension}"


def upload_product_image(
    data: bytes,
    content_type: str,
    filename: str | None = None,
    product_id=None,
    seller_id=None,
    storage: StorageGateway | None = None,
) -> str:
    """Upload a product photo and return its public URL."""
    validate_image(content_type, len(data))

    storage = storage or get_storage()
    path = image_path(filename, content_type, product_id)
    try:
        url = storage.upload(setting("PRODUCT_IMAGE_BUCKET"), path, data, content_type)
    except StorageError as exc:
        logger.error("product_image_upload_failed", product_id=product_id, path=path, error=str(exc))
        raise ValidationError({"file": ["Image upload failed. Please try again."]}) from exc

    if product_id:
        current_domain.process(
            ChangeProductImage(product_id=product_id, seller_id=seller_id, image_url=url),
            asynchronous=False,
        )

    logger.info("product_image_uploaded", product_id=product_id, url=url)
    return url
