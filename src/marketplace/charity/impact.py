"""Charity progress and donation statistics for the donation pages and dashboard."""

from collections import defaultdict

from protean.utils.globals import current_domain

from marketplace.charity.charity.charity import Charity, CharityCategory
from marketplace.charity.donation.donation import Donation, DonationStatus


def _completed_donations(charity_id=None) -> list[Donation]:
    query = current_domain.repository_for(Donation)._dao.query.filter(status=DonationStatus.COMPLETED.value)
    if charity_id:
        query = query.filter(charity_id=str(charity_id))
    return query.limit(None).all().items


def charity_view(charity: Charity) -> dict:
    return {
        "charity_id": str(charity.id),
        "name": charity.name,
        "description": charity.description,
        "category": charity.category,
        "website_url": charity.website_url,
        "contact_email": charity.contact_email,
        "contact_phone": charity.contact_phone,
        "address": charity.address,
        "city": charity.city,
        "province": charity.province,
        "image_url": charity.image_url,
        "target_amount": charity.target_amount or 0.0,
        "raised_amount": charity.raised_amount or 0.0,
        "progress_percentage": charity.progress_percentage,
        "is_active": charity.is_active,
        "verification_status": charity.verification_status,
    }


def _select_charities(category=None, active_only=True) -> list[Charity]:
    if category and category not in {c.value for c in CharityCategory}:
        return []

    charities = current_domain.repository_for(Charity)._dao.query.limit(None).all().items
    selected = [
        c for c in charities if (not active_only or c.is_active) and (not category or c.category == category)
    ]
    return sorted(selected, key=lambda c: c.name.lower())


def list_charities(category: str | None = None, active_only: bool = True) -> list[dict]:
    return [charity_view(c) for c in _select_charities(category, active_only)]


def charity_stats(charity_id) -> dict:
    charity = current_domain.repository_for(Charity).get(charity_id)
    donations = _completed_donations(charity_id)
    return {
        **charity_view(charity),
        "total_donations": len(donations),
        "unique_donors": len({str(d.user_id) for d in donations}),
    }


def impact_summary(category: str | None = None) -> dict:
    """People helped and projects completed, per charity and overall."""
    entries = [
        {**charity_view(c), "people_helped": c.people_helped, "projects_completed": c.projects_completed}
        for c in _select_charities(category)
    ]
    return {
        "charities": entries,
        "total_raised": round(sum(e["raised_amount"] for e in entries), 2),
        "people_helped": sum(e["people_helped"] for e in entries),
        "projects_completed": sum(e["projects_completed"] for e in entries),
    }


def donation_stats(top: int = 5) -> dict:
    donations = _completed_donations()
    total_amount = round(sum(d.amount for d in donations), 2)

    per_charity = defaultdict(float)
    for donation in donations:
        if donation.charity_id:
            per_charity[str(donation.charity_id)] += donation.amount

    charities = {str(c.id): c.name for c in current_domain.repository_for(Charity)._dao.query.limit(None).all().items}
    top_charities = sorted(per_charity.items(), key=lambda pair: pair[1], reverse=True)[:top]

    return {
        "total_donations": len(donations),
        "total_amount": total_amount,
        "unique_donors": len({str(d.user_id) for d in donations}),
        "average_donation": round(total_amount / len(donations), 2) if donations else 0.0,
        "top_charities": [
            {"charity_id": charity_id, "name": charities.get(charity_id), "amount": round(amount, 2)}
            for charity_id, amount in top_charities
        ],
    }


def user_donations(user_id) -> list[Donation]:
    query = current_domain.repository_for(Donation)._dao.query.filter(user_id=str(user_id)).order_by("-donated_at")
    return query.limit(None).all().items


def donation_view(donation: Donation) -> dict:
    return {
        "donation_id": str(donation.id),
        "charity_id": str(donation.charity_id) if donation.charity_id else None,
        "order_id": str(donation.order_id) if donation.order_id else None,
        "amount": donation.amount,
        "payment_method": donation.payment_method,
        "transaction_id": donation.transaction_id,
        "status": donation.status,
        "failure_reason": donation.failure_reason,
        "anonymous": donation.anonymous,
        "message": donation.message,
        "donated_at": donation.donated_at,
    }
