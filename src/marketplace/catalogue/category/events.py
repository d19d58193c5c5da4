"""Domain events for the Category aggregate."""

from protean.fields import Boolean, Identifier, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Category")
class CategoryCreated:
    """A new storefront category was created."""

    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    description: Text()


@marketplace.event(part_of="Category")
class CategoryUpdated:
    category_id: Identifier(required=True)
    name: String(required=True)
    slug: String(required=True)
    description: Text()
    is_active: Boolean()
