from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog_manager.core.errors import ActiveThemeError, NotFoundError, ValidationError  # noqa: E402
from blog_manager.domain.models import Post  # noqa: E402
from blog_manager.repositories.blog_store import BlogStore  # noqa: E402
from blog_manager.repositories.storage import MemoryStorage  # noqa: E402
from blog_manager.services.blog_service import BlogService, PostDraft, add_tag, remove_tag  # noqa: E402
from blog_manager.services.category_service import CategoryService  # noqa: E402
from blog_manager.services.theme_service import ThemeService  # noqa: E402


@pytest.fixture()
def store():
    store = BlogStore(MemoryStorage(), excerpt_length=150)
    store.initialize()
    return store


def _stored_post(store: BlogStore, post_id: str, title: str, updated_at: str, **extra) -> None:
    extra.setdefault("content", "body")
    store.save_blog(Post(id=post_id, title=title, created_at=updated_at, updated_at=updated_at, **extra))


# -------------------------- posts --------------------------
def test_save_post_requires_title_and_content(store):
    svc = BlogService(store)
    with pytest.raises(ValidationError):
        svc.save_post(PostDraft(title="  ", content="C"))
    with pytest.raises(ValidationError):
        svc.save_post(PostDraft(title="T", content=""))
    assert store.get_all_blogs() == []


def test_save_post_builds_a_new_post(store):
    svc = BlogService(store)
    post = svc.save_post(
        PostDraft(title=" Hello ", content=" World ", categories=["cat-1", "cat-1"], tags=["a", " a ", "", "b"]),
        publish=True,
    )

    assert post.id.startswith("blog-")
    assert post.title == "Hello"
    assert post.content == "World"
    assert post.excerpt == "World..."
    assert post.categories == ["cat-1"]
    assert post.tags == ["a", "b"]
    assert post.cover_image is None
    assert post.published is True
    assert post.created_at == post.updated_at == post.published_at
    assert store.get_blog_by_id(post.id) == post


def test_editing_keeps_created_at(store):
    svc = BlogService(store)
    first = svc.save_post(PostDraft(title="T", content="C", published_at="2024-03-01T00:00:00.000Z"))
    store.save_blog(Post(**{**first.__dict__, "created_at": "2020-01-01T00:00:00.000Z"}))

    edited = svc.save_post(PostDraft(id=first.id, title="T2", content="C2", excerpt="Short"))

    assert edited.created_at == "2020-01-01T00:00:00.000Z"
    assert edited.excerpt == "Short"
    assert len(store.get_all_blogs()) == 1


def test_preview_always_saves_a_draft(store):
    post = BlogService(store).save_preview(PostDraft(title="T", content="C"))
    assert store.get_blog_by_id(post.id).published is False


def test_tag_helpers():
    tags = add_tag([], " python ")
    tags = add_tag(tags, "python")
    tags = add_tag(tags, "   ")
    tags = add_tag(tags, "web")
    assert tags == ["python", "web"]
    assert remove_tag(tags, "python") == ["web"]


def test_get_and_delete_missing_post(store):
    svc = BlogService(store)
    with pytest.raises(NotFoundError):
        svc.get_post("nope")
    with pytest.raises(NotFoundError):
        svc.delete_post("nope")


def test_category_names_skip_unknown_ids(store):
    post = Post(id="blog-1", categories=["cat-3", "cat-x", "cat-1"])
    assert BlogService(store).category_names(post) == ["Travel", "Technology"]


def test_list_posts_search_matches_title_content_and_category(store):
    _stored_post(store, "blog-1", "Hello", "2024-01-01T00:00:00.000Z", categories=["cat-1"])
    _stored_post(store, "blog-2", "Trip", "2024-01-02T00:00:00.000Z", content="Lisbon notes")
    _stored_post(store, "blog-3", "Other", "2024-01-03T00:00:00.000Z", categories=["cat-x"])
    svc = BlogService(store)

    assert [p.id for p in svc.list_posts("TECH")] == ["blog-1"]
    assert [p.id for p in svc.list_posts("lisbon")] == ["blog-2"]
    assert svc.list_posts("nothing here") == []


def test_list_posts_sorting(store):
    _stored_post(store, "blog-1", "banana", "2024-01-02T00:00:00.000Z")
    _stored_post(store, "blog-2", "Apple", "2024-01-03T00:00:00.000Z")
    _stored_post(store, "blog-3", "cherry", "2024-01-01T00:00:00.000Z")
    svc = BlogService(store)

    assert [p.id for p in svc.list_posts()] == ["blog-2", "blog-1", "blog-3"]
    assert [p.title for p in svc.list_posts(sort_field="title", direction="asc")] == ["Apple", "banana", "cherry"]
    assert [p.id for p in svc.list_posts(sort_field="published")] == ["blog-1", "blog-2", "blog-3"]
    with pytest.raises(ValidationError):
        svc.list_posts(direction="sideways")


# -------------------------- categories --------------------------
def test_category_service_create_edit_delete(store):
    svc = CategoryService(store)
    with pytest.raises(ValidationError):
        svc.save("  ")

    created = svc.save(" Food ", " Recipes ")
    assert created.id.startswith("cat-")
    assert (created.name, created.description) == ("Food", "Recipes")

    edited = svc.save("Cooking", None, created.id)
    assert edited.created_at == created.created_at
    assert edited.description == ""

    with pytest.raises(NotFoundError):
        svc.save("Ghost", "", "cat-missing")

    store.save_blog(Post(id="blog-1", title="T", content="C", categories=[created.id, "cat-1"]))
    svc.delete(created.id)
    assert store.get_blog_by_id("blog-1").categories == ["cat-1"]
    with pytest.raises(NotFoundError):
        svc.delete(created.id)


# -------------------------- themes --------------------------
def test_theme_service_create_uses_form_defaults(store):
    theme = ThemeService(store).save("Mine")

    assert theme.id.startswith("theme-")
    assert theme.primary_color == "#0f766e"
    assert theme.font_family == "Inter, sans-serif"
    assert theme.is_active is False


def test_theme_service_activate_and_edit_keeps_flag(store):
    svc = ThemeService(store)
    theme = svc.save("Mine", primary_color="#000000")

    svc.activate(theme.id)
    assert svc.active_theme().id == theme.id
    assert [t.id for t in svc.list_themes() if t.is_active] == [theme.id]

    edited = svc.save("Renamed", theme_id=theme.id)
    assert edited.is_active is True
    assert edited.primary_color == "#0f766e"
    assert edited.created_at == theme.created_at


def test_theme_service_delete(store):
    svc = ThemeService(store)
    with pytest.raises(ActiveThemeError):
        svc.delete("default-light")
    with pytest.raises(NotFoundError):
        svc.delete("missing")

    svc.delete("elegant")
    assert [t.id for t in svc.list_themes()] == ["default-light", "default-dark"]
