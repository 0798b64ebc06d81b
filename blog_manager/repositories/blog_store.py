"""
Posts, categories and themes persisted over a key-value backend.

Each collection is one JSON array under a fixed key and every write
rewrites the whole array. Reads never raise: a missing backend or a value
that does not parse is logged and treated as an empty collection. Writes
always raise StorageWriteError with a user-facing label.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional
import functools
import json
import logging
import threading

from blog_manager.core.config import get_settings
from blog_manager.core.errors import (
    ActiveThemeError,
    StorageError,
    StorageWriteError,
    ValidationError,
)
from blog_manager.domain.defaults import DEFAULT_ACTIVE_THEME_ID, default_themes, sample_categories
from blog_manager.domain.models import Category, Post, Theme, make_excerpt
from blog_manager.repositories.storage import KeyValueStorage

logger = logging.getLogger(__name__)

BLOGS_STORAGE_KEY = "blog-manager-posts"
CATEGORIES_STORAGE_KEY = "blog-manager-categories"
THEMES_STORAGE_KEY = "blog-manager-themes"
ACTIVE_THEME_KEY = "blog-manager-active-theme"


def _locked(method):
    # read-modify-write of a whole collection must not interleave
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class BlogStore:
    """Upsert/delete per collection plus the cross-collection rules."""

    def __init__(self, storage: KeyValueStorage, *, excerpt_length: int | None = None) -> None:
        self.storage = storage
        self.excerpt_length = excerpt_length or get_settings().excerpt_length
        self._lock = threading.RLock()

    def close(self) -> None:
        self.storage.close()

    def __enter__(self) -> "BlogStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------- raw access --------------------------
    def _get_raw(self, key: str) -> Optional[str]:
        try:
            return self.storage.get_item(key)
        except StorageError as exc:
            logger.error("Error reading '%s' from storage: %s", key, exc)
            return None

    def _read(self, key: str) -> list[dict]:
        raw = self._get_raw(key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError as exc:
            logger.error("Ignoring unparsable value under '%s': %s", key, exc)
            return []
        if not isinstance(data, list):
            logger.error("Ignoring value under '%s': expected a list, got %s", key, type(data).__name__)
            return []
        return [item for item in data if isinstance(item, dict)]

    def _write(self, key: str, records: list[dict], label: str) -> None:
        try:
            self.storage.set_item(key, json.dumps(records, ensure_ascii=False))
        except Exception as exc:
            logger.error("Error writing '%s' to storage: %s", key, exc)
            raise StorageWriteError(label) from exc

    def _set_scalar(self, key: str, value: Optional[str], label: str) -> None:
        try:
            if value is None:
                self.storage.remove_item(key)
            else:
                self.storage.set_item(key, value)
        except Exception as exc:
            logger.error("Error writing '%s' to storage: %s", key, exc)
            raise StorageWriteError(label) from exc

    @staticmethod
    def _upsert(records: list[dict], entity: dict) -> list[dict]:
        for index, record in enumerate(records):
            if record.get("id") == entity["id"]:
                records[index] = entity
                return records
        records.append(entity)
        return records

    @staticmethod
    def _require_id(entity_id: str, kind: str) -> None:
        if not (entity_id or "").strip():
            raise ValidationError(f"A {kind} needs an id to be saved")

    # -------------------------- posts --------------------------
    def get_all_blogs(self) -> list[Post]:
        return [Post.from_dict(item) for item in self._read(BLOGS_STORAGE_KEY)]

    def get_blog_by_id(self, blog_id: str) -> Optional[Post]:
        return next((blog for blog in self.get_all_blogs() if blog.id == blog_id), None)

    @_locked
    def save_blog(self, blog: Post) -> Post:
        """Insert or fully replace a post; returns the record as stored."""
        self._require_id(blog.id, "blog post")
        stored = replace(blog, categories=list(blog.categories), tags=list(blog.tags))
        if not stored.published_at:
            stored.published_at = stored.created_at
        if not stored.excerpt.strip():
            stored.excerpt = make_excerpt(stored.content, self.excerpt_length)
        records = self._upsert(self._read(BLOGS_STORAGE_KEY), stored.to_dict())
        self._write(BLOGS_STORAGE_KEY, records, "Failed to save blog")
        return stored

    @_locked
    def delete_blog(self, blog_id: str) -> None:
        records = [item for item in self._read(BLOGS_STORAGE_KEY) if item.get("id") != blog_id]
        self._write(BLOGS_STORAGE_KEY, records, "Failed to delete blog")

    # -------------------------- categories --------------------------
    def get_all_categories(self) -> list[Category]:
        return [Category.from_dict(item) for item in self._read(CATEGORIES_STORAGE_KEY)]

    def get_category_by_id(self, category_id: str) -> Optional[Category]:
        return next((cat for cat in self.get_all_categories() if cat.id == category_id), None)

    @_locked
    def save_category(self, category: Category) -> Category:
        self._require_id(category.id, "category")
        stored = replace(category)
        records = self._upsert(self._read(CATEGORIES_STORAGE_KEY), stored.to_dict())
        self._write(CATEGORIES_STORAGE_KEY, records, "Failed to save category")
        return stored

    @_locked
    def delete_category(self, category_id: str) -> None:
        """Remove a category and strip its id from every post that uses it."""
        records = [item for item in self._read(CATEGORIES_STORAGE_KEY) if item.get("id") != category_id]
        self._write(CATEGORIES_STORAGE_KEY, records, "Failed to delete category")

        blogs = self._read(BLOGS_STORAGE_KEY)
        touched = 0
        for blog in blogs:
            refs = blog.get("categories")
            if isinstance(refs, list) and category_id in refs:
                blog["categories"] = [ref for ref in refs if ref != category_id]
                touched += 1
        if touched:
            self._write(BLOGS_STORAGE_KEY, blogs, "Failed to delete category")
            logger.info("Removed category '%s' from %d post(s)", category_id, touched)

    # -------------------------- themes --------------------------
    def get_all_themes(self) -> list[Theme]:
        return [Theme.from_dict(item) for item in self._read(THEMES_STORAGE_KEY)]

    def get_theme_by_id(self, theme_id: str) -> Optional[Theme]:
        return next((theme for theme in self.get_all_themes() if theme.id == theme_id), None)

    def get_active_theme_id(self) -> Optional[str]:
        return self._get_raw(ACTIVE_THEME_KEY) or None

    @_locked
    def save_theme(self, theme: Theme) -> Theme:
        """
        Insert or fully replace a theme.

        Saving an active theme deactivates every other stored theme and
        records its id under the active-theme key.
        """
        self._require_id(theme.id, "theme")
        stored = replace(theme)
        records = self._read(THEMES_STORAGE_KEY)
        if stored.is_active:
            for record in records:
                if record.get("id") != stored.id:
                    record["isActive"] = False
        records = self._upsert(records, stored.to_dict())
        self._write(THEMES_STORAGE_KEY, records, "Failed to save theme")
        if stored.is_active:
            self._set_scalar(ACTIVE_THEME_KEY, stored.id, "Failed to save theme")
        return stored

    @_locked
    def delete_theme(self, theme_id: str) -> None:
        """
        Remove a theme.

        The theme flagged active cannot be deleted. Removing the last theme
        restores the default set so there is always something to render.
        """
        records = self._read(THEMES_STORAGE_KEY)
        target = next((record for record in records if record.get("id") == theme_id), None)
        if target is not None and target.get("isActive"):
            raise ActiveThemeError()

        remaining = [record for record in records if record.get("id") != theme_id]
        if not remaining:
            logger.info("Last theme deleted, restoring default themes")
            remaining = [default.to_dict() for default in default_themes()]
        self._write(THEMES_STORAGE_KEY, remaining, "Failed to delete theme")

        if self.get_active_theme_id() == theme_id:
            self._set_scalar(ACTIVE_THEME_KEY, None, "Failed to delete theme")

    def get_active_theme(self) -> Optional[Theme]:
        """
        Theme to render with.

        Resolution order: the cached active id if it still exists, then the
        first theme flagged active, then the first theme. None only when
        there are no themes at all.
        """
        themes = self.get_all_themes()
        active_id = self.get_active_theme_id()
        if active_id:
            cached = next((theme for theme in themes if theme.id == active_id), None)
            if cached:
                return cached
        flagged = next((theme for theme in themes if theme.is_active), None)
        if flagged:
            return flagged
        return themes[0] if themes else None

    # -------------------------- seeding --------------------------
    def _is_unset(self, key: str) -> bool:
        # unreadable counts as present
        try:
            return not self.storage.get_item(key)
        except StorageError as exc:
            logger.error("Skipping seed of '%s', storage read failed: %s", key, exc)
            return False

    @_locked
    def initialize(self) -> None:
        """Seed missing collections; existing data is never overwritten."""
        if self._is_unset(BLOGS_STORAGE_KEY):
            self._write(BLOGS_STORAGE_KEY, [], "Failed to initialize storage")

        if self._is_unset(CATEGORIES_STORAGE_KEY):
            categories = [category.to_dict() for category in sample_categories()]
            self._write(CATEGORIES_STORAGE_KEY, categories, "Failed to initialize storage")
            logger.info("Seeded %d sample categories", len(categories))

        if self._is_unset(THEMES_STORAGE_KEY):
            themes = [theme.to_dict() for theme in default_themes()]
            self._write(THEMES_STORAGE_KEY, themes, "Failed to initialize storage")
            self._set_scalar(ACTIVE_THEME_KEY, DEFAULT_ACTIVE_THEME_ID, "Failed to initialize storage")
            logger.info("Seeded %d default themes", len(themes))
