"""Discount code management from the seller dashboard: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, List, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.promotions.discount_code import DiscountCode
from marketplace.shared.updates import requested_changes


@marketplace.command(part_of="DiscountCode")
class CreateDiscountCode:
    code = String(required=True, max_length=50)
    discount_type = String(required=True, max_length=20)
    value = Float(required=True)
    min_amount = Float()
    max_discount = Float()
    description = Text()
    usage_limit = Integer()
    valid_from = DateTime()
    valid_until = DateTime()
    is_active = Boolean(default=True)
    seller_id = Identifier()


@marketplace.command(part_of="DiscountCode")
class UpdateDiscountCode:
    discount_code_id = Identifier(required=True)
    seller_id = Identifier()
    discount_type = String(max_length=20)
    value = Float()
    min_amount = Float()
    max_discount = Float()
    description = Text()
    usage_limit = Integer()
    valid_from = DateTime()
    valid_until = DateTime()
    is_active = Boolean()
    clear = List(content_type=String)  # optional fields to empty


@marketplace.command(part_of="DiscountCode")
class DeleteDiscountCode:
    discount_code_id = Identifier(required=True)
    seller_id = Identifier()


_UPDATABLE = (
    "discount_type",
    "value",
    "min_amount",
    "max_discount",
    "description",
    "usage_limit",
    "valid_from",
    "valid_until",
    "is_active",
)
_CLEARABLE = ("min_amount", "max_discount", "description", "usage_limit", "valid_from", "valid_until")


def _owned_code(repo, command) -> DiscountCode:
    discount = repo.get(command.discount_code_id)
    if command.seller_id and discount.seller_id and str(discount.seller_id) != str(command.seller_id):
        raise ValidationError({"discount_code_id": ["This discount code belongs to another seller"]})
    return discount


@marketplace.command_handler(part_of=DiscountCode)
class ManageDiscountCodesHandler:
    @handle(CreateDiscountCode)
    def create_discount_code(self, command):
        repo = current_domain.repository_for(DiscountCode)
        if repo.find_by_code(command.code) is not None:
            raise ValidationError({"code": [f"Discount code {command.code.strip().upper()} already exists"]})

        discount = DiscountCode.create(
            code=command.code,
            discount_type=command.discount_type,
            value=command.value,
            min_amount=command.min_amount,
            max_discount=command.max_discount,
            description=command.description,
            usage_limit=command.usage_limit,
            valid_from=command.valid_from,
            valid_until=command.valid_until,
            is_active=command.is_active if command.is_active is not None else True,
            seller_id=command.seller_id,
        )
        repo.add(discount)
        return str(discount.id)

    @handle(UpdateDiscountCode)
    def update_discount_code(self, command):
        repo = current_domain.repository_for(DiscountCode)
        discount = _owned_code(repo, command)
        changes = requested_changes(command, _UPDATABLE, _CLEARABLE)
        discount.update(**changes)
        repo.add(discount)

    @handle(DeleteDiscountCode)
    def delete_discount_code(self, command):
        repo = current_domain.repository_for(DiscountCode)
        discount = _owned_code(repo, command)
        repo._dao.delete(discount)
