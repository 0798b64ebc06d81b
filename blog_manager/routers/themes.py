from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from blog_manager.routers import get_store
from blog_manager.services.theme_service import ThemeService

router = APIRouter(prefix="/api/themes", tags=["themes"])


def _service(request: Request) -> ThemeService:
    return ThemeService(get_store(request))


def _save(svc: ThemeService, payload: dict, theme_id: str | None = None):
    return svc.save(
        payload.get("name"),
        theme_id=theme_id,
        primary_color=payload.get("primaryColor"),
        secondary_color=payload.get("secondaryColor"),
        text_color=payload.get("textColor"),
        background_color=payload.get("backgroundColor"),
        font_family=payload.get("fontFamily"),
    )


@router.get("")
def list_themes(request: Request):
    return [theme.to_dict() for theme in _service(request).list_themes()]


@router.get("/active")
def active_theme(request: Request):
    theme = _service(request).active_theme()
    if not theme:
        raise HTTPException(404, "No theme available")
    return theme.to_dict()


@router.post("", status_code=201)
def create_theme(request: Request, payload: dict):
    return _save(_service(request), payload).to_dict()


@router.put("/{theme_id}")
def update_theme(theme_id: str, request: Request, payload: dict):
    return _save(_service(request), payload, theme_id).to_dict()


@router.post("/{theme_id}/activate")
def activate_theme(theme_id: str, request: Request):
    return _service(request).activate(theme_id).to_dict()


@router.delete("/{theme_id}")
def delete_theme(theme_id: str, request: Request):
    _service(request).delete(theme_id)
    return {"ok": True}
