"""Seller registration: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.seller.seller import Seller


@marketplace.command(part_of="Seller")
class RegisterSeller:
    """Open a store for a user who already has an account with the auth provider."""

    user_id: Identifier(required=True)
    email: String(required=True, max_length=254)
    full_name: String(max_length=200)
    business_name: String(max_length=200)
    phone: String(max_length=20)
    address: String(max_length=500)
    city: String(max_length=100)
    business_type: String(max_length=50)
    tax_id: String(max_length=50)


@marketplace.command_handler(part_of=Seller)
class RegisterSellerHandler:
    @handle(RegisterSeller)
    def register_seller(self, command):
        repo = current_domain.repository_for(Seller)
        if repo.find_by_user(command.user_id) is not None:
            raise ValidationError({"user_id": ["You are already registered as a seller"]})

        seller = Seller.register(
            user_id=command.user_id,
            email=command.email,
            full_name=command.full_name,
            business_name=command.business_name,
            phone=command.phone,
            address=command.address,
            city=command.city,
            business_type=command.business_type,
            tax_id=command.tax_id,
        )
        repo.add(seller)
        return str(seller.id)
