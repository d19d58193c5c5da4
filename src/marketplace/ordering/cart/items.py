"""Cart item management: commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.ordering.cart.cart import Cart

LOGIN_REQUIRED_MESSAGE = "You need to be logged in to manage your cart"


@marketplace.command(part_of="Cart")
class AddToCart:
    customer_id = Identifier()
    product_id = Identifier(required=True)
    quantity = Integer(default=1)


@marketplace.command(part_of="Cart")
class UpdateCartQuantity:
    customer_id = Identifier()
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@marketplace.command(part_of="Cart")
class RemoveFromCart:
    customer_id = Identifier()
    product_id = Identifier(required=True)


@marketplace.command(part_of="Cart")
class ClearCart:
    customer_id = Identifier()


def _require_customer(customer_id):
    if not customer_id:
        raise ValidationError({"customer_id": [LOGIN_REQUIRED_MESSAGE]})


def available_product(product_id) -> Product:
    """The product if it can currently be bought."""
    try:
        product = current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        product = None
    if product is None or not product.is_active:
        raise ValidationError({"product_id": ["This product is no longer available"]})
    return product


def ensure_in_stock(product: Product, quantity: int) -> None:
    if quantity > (product.stock_quantity or 0):
        if not product.stock_quantity:
            raise ValidationError({"quantity": [f"{product.name} is out of stock"]})
        raise ValidationError({"quantity": [f"Only {product.stock_quantity} of {product.name} left in stock"]})


@marketplace.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        _require_customer(command.customer_id)
        repo = current_domain.repository_for(Cart)
        cart = repo.get_or_create(command.customer_id)

        quantity = command.quantity if command.quantity is not None else 1
        product = available_product(command.product_id)
        line = cart.line_for(command.product_id)
        ensure_in_stock(product, quantity + (line.quantity if line else 0))

        cart.add_item(command.product_id, quantity)
        repo.add(cart)
        return str(cart.id)

    @handle(UpdateCartQuantity)
    def update_quantity(self, command):
        _require_customer(command.customer_id)
        repo = current_domain.repository_for(Cart)
        cart = repo.get_or_create(command.customer_id)

        if command.quantity > 0:
            ensure_in_stock(available_product(command.product_id), command.quantity)

        cart.update_quantity(command.product_id, command.quantity)
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        _require_customer(command.customer_id)
        repo = current_domain.repository_for(Cart)
        cart = repo.get_or_create(command.customer_id)
        cart.remove_item(command.product_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        _require_customer(command.customer_id)
        repo = current_domain.repository_for(Cart)
        cart = repo.for_customer(command.customer_id)
        if cart is None:
            return
        cart.clear()
        repo.add(cart)
