"""Post editor and post list use cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from blog_manager.core.errors import NotFoundError, ValidationError
from blog_manager.core.utils import generate_id, utc_now_iso
from blog_manager.domain.models import Post, make_excerpt
from blog_manager.repositories.blog_store import BlogStore

SORT_DIRECTIONS = {"asc", "desc"}


@dataclass
class PostDraft:
    """Editor input before it becomes a stored Post."""

    title: str = ""
    content: str = ""
    excerpt: str = ""
    cover_image: str = ""
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    published_at: str = ""
    id: Optional[str] = None


def add_tag(tags: list[str], tag: str | None) -> list[str]:
    """Return tags with `tag` appended, unless it is blank or already present."""
    value = (tag or "").strip()
    if not value or value in tags:
        return list(tags)
    return [*tags, value]


def remove_tag(tags: list[str], tag: str) -> list[str]:
    return [existing for existing in tags if existing != tag]


class BlogService:
    """Creates, updates, previews and lists posts."""

    def __init__(self, store: BlogStore) -> None:
        self.store = store

    def _build_post(self, draft: PostDraft, *, published: bool) -> Post:
        title = (draft.title or "").strip()
        content = (draft.content or "").strip()
        if not title:
            raise ValidationError("Please enter a title for your blog post")
        if not content:
            raise ValidationError("Please enter content for your blog post")

        existing = self.store.get_blog_by_id(draft.id) if draft.id else None
        now = utc_now_iso()
        tags: list[str] = []
        for tag in draft.tags:
            tags = add_tag(tags, tag)
        return Post(
            id=draft.id or generate_id("blog-"),
            title=title,
            content=content,
            excerpt=(draft.excerpt or "").strip() or make_excerpt(content, self.store.excerpt_length),
            cover_image=(draft.cover_image or "").strip() or None,
            categories=list(dict.fromkeys(draft.categories)),
            tags=tags,
            created_at=existing.created_at if existing else now,
            updated_at=now,
            published_at=(draft.published_at or "").strip() or now,
            published=published,
        )

    def save_post(self, draft: PostDraft, *, publish: bool = False) -> Post:
        """Save as draft, or publish when `publish` is set."""
        return self.store.save_blog(self._build_post(draft, published=publish))

    def save_preview(self, draft: PostDraft) -> Post:
        """Previewing always stores the post as an unpublished draft."""
        return self.store.save_blog(self._build_post(draft, published=False))

    def get_post(self, blog_id: str) -> Post:
        post = self.store.get_blog_by_id(blog_id)
        if not post:
            raise NotFoundError(f"Blog post {blog_id} not found")
        return post

    def delete_post(self, blog_id: str) -> None:
        self.get_post(blog_id)
        self.store.delete_blog(blog_id)

    def category_names(self, post: Post) -> list[str]:
        """Names of the post's categories; ids with no category are skipped."""
        names = {category.id: category.name for category in self.store.get_all_categories()}
        return [names[category_id] for category_id in post.categories if category_id in names]

    def list_posts(self, search: str = "", sort_field: str = "updatedAt", direction: str = "desc") -> list[Post]:
        """
        Filter by a case-insensitive term over title, content and category
        names, then sort by a stored (camelCase) field.

        Fields that are not strings on every post leave the order untouched.
        """
        if direction not in SORT_DIRECTIONS:
            raise ValidationError(f"Invalid sort direction: {direction}")
        posts = self.store.get_all_blogs()
        term = (search or "").strip().lower()
        if term:
            names = {category.id: category.name.lower() for category in self.store.get_all_categories()}
            posts = [
                post
                for post in posts
                if term in post.title.lower()
                or term in post.content.lower()
                or any(term in names.get(category_id, "") for category_id in post.categories)
            ]

        values = [post.to_dict().get(sort_field) for post in posts]
        if not all(isinstance(value, str) for value in values):
            return posts
        ordered = sorted(zip(values, posts), key=lambda pair: pair[0].casefold(), reverse=direction == "desc")
        return [post for _value, post in ordered]
