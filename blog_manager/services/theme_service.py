"""Theme manager use cases (create/edit, activate, delete)."""

from __future__ import annotations

from typing import Optional

from blog_manager.core.errors import NotFoundError, ValidationError
from blog_manager.core.utils import generate_id, utc_now_iso
from blog_manager.domain.models import Theme
from blog_manager.repositories.blog_store import BlogStore

# Form defaults for a new theme (same palette as "Default Light")
DEFAULT_COLORS = {
    "primary_color": "#0f766e",
    "secondary_color": "#14b8a6",
    "text_color": "#1e293b",
    "background_color": "#ffffff",
}
DEFAULT_FONT_FAMILY = "Inter, sans-serif"


class ThemeService:
    def __init__(self, store: BlogStore) -> None:
        self.store = store

    def list_themes(self) -> list[Theme]:
        return self.store.get_all_themes()

    def active_theme(self) -> Optional[Theme]:
        return self.store.get_active_theme()

    def _get(self, theme_id: str) -> Theme:
        theme = self.store.get_theme_by_id(theme_id)
        if not theme:
            raise NotFoundError(f"Theme {theme_id} not found")
        return theme

    def save(
        self,
        name: str | None,
        *,
        theme_id: Optional[str] = None,
        primary_color: str | None = None,
        secondary_color: str | None = None,
        text_color: str | None = None,
        background_color: str | None = None,
        font_family: str | None = None,
    ) -> Theme:
        """
        Create a theme or edit an existing one.

        Editing keeps createdAt and the active flag; activation only happens
        through activate().
        """
        name_value = (name or "").strip()
        if not name_value:
            raise ValidationError("Please enter a theme name")
        existing = self._get(theme_id) if theme_id else None
        theme = Theme(
            id=theme_id or generate_id("theme-"),
            name=name_value,
            primary_color=primary_color or DEFAULT_COLORS["primary_color"],
            secondary_color=secondary_color or DEFAULT_COLORS["secondary_color"],
            text_color=text_color or DEFAULT_COLORS["text_color"],
            background_color=background_color or DEFAULT_COLORS["background_color"],
            font_family=font_family or DEFAULT_FONT_FAMILY,
            created_at=existing.created_at if existing else utc_now_iso(),
            is_active=existing.is_active if existing else False,
        )
        return self.store.save_theme(theme)

    def activate(self, theme_id: str) -> Theme:
        theme = self._get(theme_id)
        theme.is_active = True
        return self.store.save_theme(theme)

    def delete(self, theme_id: str) -> None:
        self._get(theme_id)
        self.store.delete_theme(theme_id)
