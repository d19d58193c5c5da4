"""Default discount codes offered when the storefront launches."""

import structlog
from protean.utils.globals import current_domain

from marketplace.promotions.discount_code import DiscountCode

logger = structlog.get_logger(__name__)

DEFAULT_CODES = (
    {"code": "WELCOME10", "discount_type": "percentage", "value": 10, "min_amount": 1000,
     "description": "10% off for new customers"},
    {"code": "FREESHIP", "discount_type": "fixed", "value": 500, "min_amount": 2000,
     "description": "Rs. 500 off on orders above Rs. 2000"},
    {"code": "PAKISTAN20", "discount_type": "percentage", "value": 20, "min_amount": 5000,
     "description": "20% off on orders above Rs. 5000"},
    {"code": "FLASH50", "discount_type": "fixed", "value": 1000, "min_amount": 3000,
     "description": "Rs. 1000 off flash sale"},
)  # fmt: skip


def seed_default_codes() -> list[str]:
    """Create any default code that does not exist yet; returns the codes created."""
    repo = current_domain.repository_for(DiscountCode)
    created = []
    for defaults in DEFAULT_CODES:
        if repo.find_by_code(defaults["code"]) is not None:
            continue
        repo.add(DiscountCode.create(**defaults))
        created.append(defaults["code"])

    logger.info("discount_codes_seeded", created=created)
    return created
