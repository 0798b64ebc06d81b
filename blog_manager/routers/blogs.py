from __future__ import annotations

from fastapi import APIRouter, Request

from blog_manager.routers import get_store
from blog_manager.services.blog_service import BlogService, PostDraft

router = APIRouter(prefix="/api/blogs", tags=["blogs"])


def _service(request: Request) -> BlogService:
    return BlogService(get_store(request))


def _as_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def _draft(payload: dict, blog_id: str | None = None) -> PostDraft:
    return PostDraft(
        title=payload.get("title") or "",
        content=payload.get("content") or "",
        excerpt=payload.get("excerpt") or "",
        cover_image=payload.get("coverImage") or "",
        categories=_as_list(payload.get("categories")),
        tags=_as_list(payload.get("tags")),
        published_at=payload.get("publishedAt") or "",
        id=blog_id or payload.get("id") or None,
    )


@router.get("")
def list_blogs(request: Request, q: str = "", sort: str = "updatedAt", direction: str = "desc"):
    posts = _service(request).list_posts(q, sort, direction)
    return [post.to_dict() for post in posts]


@router.post("", status_code=201)
def create_blog(request: Request, payload: dict):
    post = _service(request).save_post(_draft(payload), publish=bool(payload.get("published")))
    return post.to_dict()


@router.post("/preview", status_code=201)
def preview_blog(request: Request, payload: dict):
    post = _service(request).save_preview(_draft(payload))
    return {"id": post.id, "previewUrl": f"/preview/{post.id}"}


@router.get("/{blog_id}")
def get_blog(blog_id: str, request: Request):
    return _service(request).get_post(blog_id).to_dict()


@router.put("/{blog_id}")
def update_blog(blog_id: str, request: Request, payload: dict):
    svc = _service(request)
    svc.get_post(blog_id)
    post = svc.save_post(_draft(payload, blog_id), publish=bool(payload.get("published")))
    return post.to_dict()


@router.delete("/{blog_id}")
def delete_blog(blog_id: str, request: Request):
    _service(request).delete_post(blog_id)
    return {"ok": True}
