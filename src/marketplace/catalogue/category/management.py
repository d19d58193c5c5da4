"""Category management: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.category.category import Category
from marketplace.domain import marketplace
from marketplace.shared.text import slugify


@marketplace.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()
    image_url: String(max_length=1000)


@marketplace.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()
    image_url: String(max_length=1000)
    is_active: Boolean()


def _ensure_unique_name(repo, name, category_id=None):
    slug = slugify(name)
    clash = repo._dao.query.filter(slug=slug).all().first
    if clash is not None and str(clash.id) != str(category_id):
        raise ValidationError({"name": [f"A category named '{name}' already exists"]})


@marketplace.command_handler(part_of=Category)
class ManageCategoriesHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        _ensure_unique_name(repo, command.name)
        category = Category.create(
            name=command.name,
            description=command.description,
            image_url=command.image_url,
        )
        repo.add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        if command.name is not None:
            _ensure_unique_name(repo, command.name, category.id)
        category.update(
            name=command.name,
            description=command.description,
            image_url=command.image_url,
            is_active=command.is_active,
        )
        repo.add(category)
