"""Category manager use cases."""

from __future__ import annotations

from typing import Optional

from blog_manager.core.errors import NotFoundError, ValidationError
from blog_manager.core.utils import generate_id, utc_now_iso
from blog_manager.domain.models import Category
from blog_manager.repositories.blog_store import BlogStore


class CategoryService:
    def __init__(self, store: BlogStore) -> None:
        self.store = store

    def list_categories(self) -> list[Category]:
        return self.store.get_all_categories()

    def save(self, name: str | None, description: str | None = "", category_id: Optional[str] = None) -> Category:
        """Create a category, or replace the one with `category_id`."""
        name_value = (name or "").strip()
        if not name_value:
            raise ValidationError("Please enter a category name")
        existing = self.store.get_category_by_id(category_id) if category_id else None
        if category_id and not existing:
            raise NotFoundError(f"Category {category_id} not found")
        category = Category(
            id=category_id or generate_id("cat-"),
            name=name_value,
            description=(description or "").strip(),
            created_at=existing.created_at if existing else utc_now_iso(),
        )
        return self.store.save_category(category)

    def delete(self, category_id: str) -> None:
        if not self.store.get_category_by_id(category_id):
            raise NotFoundError(f"Category {category_id} not found")
        self.store.delete_category(category_id)
