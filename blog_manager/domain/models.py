"""Plain records for posts, categories and themes.

Stored dictionaries use camelCase keys so that data exported from the
browser dashboard can be loaded as-is.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


def _str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item) for item in value if item is not None]


@dataclass
class Post:
    id: str
    title: str = ""
    content: str = ""
    excerpt: str = ""
    cover_image: Optional[str] = None
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""
    published_at: str = ""
    published: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Post":
        cover = data.get("coverImage")
        return cls(
            id=_str(data.get("id")),
            title=_str(data.get("title")),
            content=_str(data.get("content")),
            excerpt=_str(data.get("excerpt")),
            cover_image=_str(cover) if cover else None,
            categories=_str_list(data.get("categories")),
            tags=_str_list(data.get("tags")),
            created_at=_str(data.get("createdAt")),
            updated_at=_str(data.get("updatedAt")),
            published_at=_str(data.get("publishedAt")),
            published=bool(data.get("published", False)),
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "excerpt": self.excerpt,
            "categories": list(self.categories),
            "tags": list(self.tags),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "publishedAt": self.published_at,
            "published": self.published,
        }
        if self.cover_image:
            data["coverImage"] = self.cover_image
        return data


@dataclass
class Category:
    id: str
    name: str = ""
    description: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Category":
        return cls(
            id=_str(data.get("id")),
            name=_str(data.get("name")),
            description=_str(data.get("description")),
            created_at=_str(data.get("createdAt")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "createdAt": self.created_at,
        }


@dataclass
class Theme:
    id: str
    name: str = ""
    primary_color: str = ""
    secondary_color: str = ""
    text_color: str = ""
    background_color: str = ""
    font_family: str = ""
    created_at: str = ""
    is_active: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Theme":
        return cls(
            id=_str(data.get("id")),
            name=_str(data.get("name")),
            primary_color=_str(data.get("primaryColor")),
            secondary_color=_str(data.get("secondaryColor")),
            text_color=_str(data.get("textColor")),
            background_color=_str(data.get("backgroundColor")),
            font_family=_str(data.get("fontFamily")),
            created_at=_str(data.get("createdAt")),
            is_active=bool(data.get("isActive", False)),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
            "textColor": self.text_color,
            "backgroundColor": self.background_color,
            "fontFamily": self.font_family,
            "createdAt": self.created_at,
            "isActive": self.is_active,
        }


def make_excerpt(content: str, length: int = 150) -> str:
    """First `length` characters of the content, stripped, plus an ellipsis."""
    return (content or "")[:length].strip() + "..."
