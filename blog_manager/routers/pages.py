from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blog_manager.domain.markup import render_markup
from blog_manager.routers import get_store
from blog_manager.services.blog_service import BlogService

router = APIRouter(prefix="", tags=["pages"])


def _templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


@router.get("/preview/{blog_id}", response_class=HTMLResponse)
def preview(blog_id: str, request: Request):
    store = get_store(request)
    svc = BlogService(store)
    post = svc.get_post(blog_id)
    context = {
        "post": post,
        "content_html": render_markup(post.content),
        "category_names": svc.category_names(post),
        "theme": store.get_active_theme(),
    }
    return _templates(request).TemplateResponse(request, "preview.html", context)
