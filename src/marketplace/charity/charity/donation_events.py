"""Charities are credited with completed donations."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.charity.charity.charity import Charity
from marketplace.charity.donation.events import DonationCompleted
from marketplace.domain import marketplace

logger = structlog.get_logger(__name__)


@marketplace.event_handler(part_of=Charity, stream_category="marketplace::donation")
class CharityDonationEventHandler:
    @handle(DonationCompleted)
    def on_donation_completed(self, event: DonationCompleted) -> None:
        if not event.charity_id:
            return

        repo = current_domain.repository_for(Charity)
        try:
            charity = repo.get(event.charity_id)
        except ObjectNotFoundError:
            logger.warning("donation_for_unknown_charity", charity_id=str(event.charity_id))
            return

        charity.receive_donation(event.donation_id, event.amount)
        repo.add(charity)
