"""Product listing management from the seller dashboard: commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, List, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.shared.updates import requested_changes


@marketplace.command(part_of="Product")
class AddProduct:
    seller_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    category_id: Identifier()
    price: Float()
    original_price: Float()
    stock_quantity: Integer(default=0)
    image_url: String(max_length=1000)


@marketplace.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    category_id: Identifier()
    price: Float()
    original_price: Float()
    stock_quantity: Integer()
    image_url: String(max_length=1000)
    is_active: Boolean()
    clear: List(content_type=String)  # optional fields to empty


@marketplace.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)


@marketplace.command(part_of="Product")
class ChangeProductImage:
    product_id: Identifier(required=True)
    seller_id: Identifier()
    image_url: String(required=True, max_length=1000)


@marketplace.command(part_of="Product")
class RecordProductView:
    product_id: Identifier(required=True)


def _ensure_category_exists(category_id):
    if not category_id:
        return
    try:
        current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise ValidationError({"category_id": [f"Category {category_id} does not exist"]}) from None


def _owned_product(repo, product_id, seller_id):
    product = repo.get(product_id)
    if seller_id and str(product.seller_id) != str(seller_id):
        raise ValidationError({"seller_id": ["Product does not belong to this seller"]})
    return product


_PRODUCT_FIELDS = (
    "name",
    "description",
    "category_id",
    "price",
    "original_price",
    "stock_quantity",
    "image_url",
    "is_active",
)
_CLEARABLE_PRODUCT_FIELDS = ("description", "category_id", "original_price", "image_url")


@marketplace.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        _ensure_category_exists(command.category_id)
        product = Product.create(
            seller_id=command.seller_id,
            name=command.name,
            description=command.description,
            category_id=command.category_id,
            price=command.price,
            original_price=command.original_price,
            stock_quantity=command.stock_quantity if command.stock_quantity is not None else 0,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id)
        _ensure_category_exists(command.category_id)
        product.update(**requested_changes(command, _PRODUCT_FIELDS, _CLEARABLE_PRODUCT_FIELDS))
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id)
        product.remove()
        repo.add(product)

    @handle(ChangeProductImage)
    def change_image(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id)
        product.change_image(command.image_url)
        repo.add(product)

    @handle(RecordProductView)
    def record_view(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.record_view()
        repo.add(product)
