"""Reviewing goods donations: status changes, pickups and removal."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Date, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.charity.goods.goods_donation import GoodsDonation
from marketplace.domain import marketplace


@marketplace.command(part_of="GoodsDonation")
class UpdateGoodsDonationStatus:
    donation_id = Identifier(required=True)
    status = String(required=True, max_length=20)
    admin_notes = Text()


@marketplace.command(part_of="GoodsDonation")
class ScheduleGoodsPickup:
    donation_id = Identifier(required=True)
    pickup_date = Date(required=True)
    pickup_time = String(required=True, max_length=50)
    admin_notes = Text()


@marketplace.command(part_of="GoodsDonation")
class DeleteGoodsDonation:
    donation_id = Identifier(required=True)
    donor_id = Identifier()


@marketplace.command_handler(part_of=GoodsDonation)
class GoodsDonationReviewHandler:
    @handle(UpdateGoodsDonationStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(GoodsDonation)
        donation = repo.get(command.donation_id)
        try:
            donation.change_status(command.status, admin_notes=command.admin_notes)
        except ValueError:
            raise ValidationError({"status": [f"Unknown donation status: {command.status}"]}) from None
        repo.add(donation)

    @handle(ScheduleGoodsPickup)
    def schedule_pickup(self, command):
        repo = current_domain.repository_for(GoodsDonation)
        donation = repo.get(command.donation_id)
        donation.schedule_pickup(command.pickup_date, command.pickup_time, admin_notes=command.admin_notes)
        repo.add(donation)

    @handle(DeleteGoodsDonation)
    def delete(self, command):
        repo = current_domain.repository_for(GoodsDonation)
        donation = repo.get(command.donation_id)
        if command.donor_id and str(donation.donor_id) != str(command.donor_id):
            raise ValidationError({"donor_id": ["You can only delete your own donations"]})
        repo._dao.delete(donation)
