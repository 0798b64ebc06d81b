"""
FastAPI routers grouped by resource (blogs, categories, themes, pages).

Each module exposes an APIRouter included by app.create_app(). Routers get
the BlogStore from request.app.state and delegate to the services.
"""

from __future__ import annotations

from fastapi import Request

from blog_manager.repositories.blog_store import BlogStore


def get_store(request: Request) -> BlogStore:
    store = getattr(getattr(request.app, "state", None), "store", None)
    if not store:
        raise RuntimeError("BlogStore not configured")
    return store
