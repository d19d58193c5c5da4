"""Charity listing management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.charity.charity.charity import Charity
from marketplace.domain import marketplace


@marketplace.command(part_of="Charity")
class RegisterCharity:
    name = String(required=True, max_length=200)
    description = Text()
    category = String(max_length=50)
    website_url = String(max_length=500)
    contact_email = String(max_length=254)
    contact_phone = String(max_length=20)
    address = String(max_length=500)
    city = String(max_length=100)
    province = String(max_length=100)
    image_url = String(max_length=1000)
    target_amount = Float()
    is_active = Boolean(default=True)
    created_by = Identifier()


@marketplace.command(part_of="Charity")
class UpdateCharity:
    charity_id = Identifier(required=True)
    name = String(max_length=200)
    description = Text()
    category = String(max_length=50)
    website_url = String(max_length=500)
    contact_email = String(max_length=254)
    contact_phone = String(max_length=20)
    address = String(max_length=500)
    city = String(max_length=100)
    province = String(max_length=100)
    image_url = String(max_length=1000)
    target_amount = Float()
    is_active = Boolean()


@marketplace.command(part_of="Charity")
class DeleteCharity:
    charity_id = Identifier(required=True)


@marketplace.command(part_of="Charity")
class VerifyCharity:
    charity_id = Identifier(required=True)


@marketplace.command(part_of="Charity")
class RejectCharity:
    charity_id = Identifier(required=True)
    reason = Text()


_LISTING_FIELDS = (
    "name",
    "description",
    "category",
    "website_url",
    "contact_email",
    "contact_phone",
    "address",
    "city",
    "province",
    "image_url",
    "target_amount",
)


@marketplace.command_handler(part_of=Charity)
class ManageCharitiesHandler:
    @handle(RegisterCharity)
    def register_charity(self, command):
        details = {name: getattr(command, name) for name in _LISTING_FIELDS if getattr(command, name) is not None}
        charity = Charity.register(
            is_active=command.is_active if command.is_active is not None else True,
            created_by=command.created_by,
            **details,
        )
        current_domain.repository_for(Charity).add(charity)
        return str(charity.id)

    @handle(UpdateCharity)
    def update_charity(self, command):
        repo = current_domain.repository_for(Charity)
        charity = repo.get(command.charity_id)
        charity.update(**{name: getattr(command, name) for name in (*_LISTING_FIELDS, "is_active")})
        repo.add(charity)

    @handle(DeleteCharity)
    def delete_charity(self, command):
        repo = current_domain.repository_for(Charity)
        repo._dao.delete(repo.get(command.charity_id))

    @handle(VerifyCharity)
    def verify_charity(self, command):
        repo = current_domain.repository_for(Charity)
        charity = repo.get(command.charity_id)
        charity.verify()
        repo.add(charity)

    @handle(RejectCharity)
    def reject_charity(self, command):
        repo = current_domain.repository_for(Charity)
        charity = repo.get(command.charity_id)
        charity.reject(reason=command.reason)
        repo.add(charity)
