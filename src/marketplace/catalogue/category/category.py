"""Category aggregate: the storefront's product groupings."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from marketplace.catalogue.category.events import CategoryCreated, CategoryUpdated
from marketplace.domain import marketplace
from marketplace.shared.text import slugify


@marketplace.aggregate
class Category:
    """A named group of products, e.g. "Electronics" or "Home & Garden"."""

    name: String(max_length=100)
    slug: String(max_length=120)
    description: Text()
    image_url: String(max_length=1000)
    is_active: Boolean(default=True)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def name_must_not_be_blank(self):
        if not (self.name or "").strip():
            raise ValidationError({"name": ["Category name is required"]})

    @classmethod
    def create(cls, name, description=None, image_url=None):
        now = datetime.now(UTC)
        category = cls(
            name=name.strip() if name else name,
            slug=slugify(name or ""),
            description=description,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=str(category.id),
                name=category.name,
                slug=category.slug,
                description=description,
            )
        )
        return category

    def update(self, name=None, description=None, image_url=None, is_active=None):
        if name is not None:
            self.name = name.strip()
            self.slug = slugify(name)
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        if is_active is not None:
            self.is_active = is_active
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryUpdated(
                category_id=str(self.id),
                name=self.name,
                slug=self.slug,
                description=self.description,
                is_active=self.is_active,
            )
        )
