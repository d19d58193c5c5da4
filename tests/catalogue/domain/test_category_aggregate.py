"""Tests for the Category aggregate."""

import pytest
from marketplace.catalogue.category.category import Category
from marketplace.catalogue.category.events import CategoryCreated, CategoryUpdated
from protean.exceptions import ValidationError


class TestCategory:
    def test_create_sets_slug(self):
        category = Category.create(name="Home & Garden")
        assert category.slug == "home-garden"
        assert category.is_active is True
        assert any(isinstance(e, CategoryCreated) for e in category._events)

    def test_name_required(self):
        with pytest.raises(ValidationError) as exc:
            Category.create(name="  ")
        assert exc.value.messages["name"] == ["Category name is required"]

    def test_rename_updates_slug(self):
        category = Category.create(name="Electronics")
        category.update(name="Phones & Tablets")
        assert category.slug == "phones-tablets"
        assert any(isinstance(e, CategoryUpdated) for e in category._events)

    def test_deactivate(self):
        category = Category.create(name="Electronics")
        category.update(is_active=False)
        assert category.is_active is False
