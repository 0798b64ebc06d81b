from __future__ import annotations

from fastapi import APIRouter, Request

from blog_manager.routers import get_store
from blog_manager.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


def _service(request: Request) -> CategoryService:
    return CategoryService(get_store(request))


@router.get("")
def list_categories(request: Request):
    return [category.to_dict() for category in _service(request).list_categories()]


@router.post("", status_code=201)
def create_category(request: Request, payload: dict):
    category = _service(request).save(payload.get("name"), payload.get("description"))
    return category.to_dict()


@router.put("/{category_id}")
def update_category(category_id: str, request: Request, payload: dict):
    category = _service(request).save(payload.get("name"), payload.get("description"), category_id)
    return category.to_dict()


@router.delete("/{category_id}")
def delete_category(category_id: str, request: Request):
    _service(request).delete(category_id)
    return {"ok": True}
