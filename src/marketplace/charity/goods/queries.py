"""Listing and summarising goods donations."""

from protean.utils.globals import current_domain

from marketplace.charity.goods.goods_donation import GoodsDonation, GoodsDonationStatus


def _newest_first(query) -> list[GoodsDonation]:
    return query.order_by("-created_at").limit(None).all().items


def donor_donations(donor_id) -> list[GoodsDonation]:
    query = current_domain.repository_for(GoodsDonation)._dao.query.filter(donor_id=str(donor_id))
    return _newest_first(query)


def all_donations(status: str | None = None, category: str | None = None) -> list[GoodsDonation]:
    query = current_domain.repository_for(GoodsDonation)._dao.query
    if status:
        query = query.filter(status=status)
    if category:
        query = query.filter(category=category)
    return _newest_first(query)


def goods_donation_stats(donations: list[GoodsDonation] | None = None) -> dict:
    donations = all_donations() if donations is None else donations
    by_status = {status: 0 for status in GoodsDonationStatus}
    for donation in donations:
        by_status[GoodsDonationStatus(donation.status)] += 1

    total_value = round(sum(d.estimated_value or 0 for d in donations), 2)
    return {
        "total": len(donations),
        "pending": by_status[GoodsDonationStatus.PENDING],
        "approved": by_status[GoodsDonationStatus.APPROVED],
        "rejected": by_status[GoodsDonationStatus.REJECTED],
        "picked_up": by_status[GoodsDonationStatus.PICKED_UP],
        "completed": by_status[GoodsDonationStatus.COMPLETED],
        "total_estimated_value": total_value,
        "average_estimated_value": round(total_value / len(donations), 2) if donations else 0.0,
    }


def goods_view(donation: GoodsDonation) -> dict:
    return {
        "donation_id": str(donation.id),
        "donor_id": str(donation.donor_id),
        "product_name": donation.product_name,
        "description": donation.description,
        "condition": donation.condition,
        "category": donation.category,
        "estimated_value": donation.estimated_value or 0.0,
        "quantity": donation.quantity,
        "donor_name": donation.donor_name,
        "donor_email": donation.donor_email,
        "donor_phone": donation.donor_phone,
        "pickup_address": donation.pickup_address,
        "pickup_city": donation.pickup_city,
        "preferred_pickup_date": donation.preferred_pickup_date,
        "additional_notes": donation.additional_notes,
        "images": donation.images,
        "status": donation.status,
        "admin_notes": donation.admin_notes,
        "pickup_date": donation.pickup_date,
        "pickup_time": donation.pickup_time,
        "created_at": donation.created_at,
    }
