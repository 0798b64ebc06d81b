"""Seed data: default themes and sample categories."""
from __future__ import annotations

from blog_manager.core.utils import utc_now_iso
from blog_manager.domain.models import Category, Theme

DEFAULT_ACTIVE_THEME_ID = "default-light"

# id, name, primary, secondary, text, background, font
_THEME_ROWS = (
    ("default-light", "Default Light", "#0f766e", "#14b8a6", "#1e293b", "#ffffff", "Inter, sans-serif"),
    ("default-dark", "Default Dark", "#14b8a6", "#2dd4bf", "#f1f5f9", "#1e293b", "Inter, sans-serif"),
    ("elegant", "Elegant", "#7c3aed", "#a78bfa", "#1e293b", "#f8fafc", "Georgia, serif"),
)

_CATEGORY_ROWS = (
    ("cat-1", "Technology", "Posts about technology and software development"),
    ("cat-2", "Lifestyle", "Posts about lifestyle and personal experiences"),
    ("cat-3", "Travel", "Posts about travel and adventures"),
)


def default_themes() -> list[Theme]:
    """Fresh copies of the built-in themes, first one active."""
    now = utc_now_iso()
    return [
        Theme(
            id=theme_id,
            name=name,
            primary_color=primary,
            secondary_color=secondary,
            text_color=text,
            background_color=background,
            font_family=font,
            created_at=now,
            is_active=theme_id == DEFAULT_ACTIVE_THEME_ID,
        )
        for theme_id, name, primary, secondary, text, background, font in _THEME_ROWS
    ]


def sample_categories() -> list[Category]:
    now = utc_now_iso()
    return [
        Category(id=cat_id, name=name, description=description, created_at=now)
        for cat_id, name, description in _CATEGORY_ROWS
    ]
