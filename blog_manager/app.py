"""FastAPI application exposing the Blog Manager store."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.templating import Jinja2Templates

from blog_manager.core.config import get_settings
from blog_manager.repositories.blog_store import BlogStore
from blog_manager.repositories.storage import build_storage
from blog_manager.routers import blogs as blogs_router
from blog_manager.routers import categories as categories_router
from blog_manager.routers import pages as pages_router
from blog_manager.routers import themes as themes_router
from blog_manager.routers.error_handlers import register_error_handlers

logger = logging.getLogger(__name__)

BASE = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE / "templates"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(store: BlogStore | None = None) -> FastAPI:
    """Factory compatible with uvicorn (--factory) and the tests."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if store is None:
        store = BlogStore(build_storage(settings), excerpt_length=settings.excerpt_length)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.initialize()
        logger.info("Blog Manager started (%s backend)", settings.storage_backend)
        try:
            yield
        finally:
            store.close()
            logger.info("Blog Manager shutting down")

    app = FastAPI(title="Blog Manager API", lifespan=lifespan)
    app.state.store = store
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    allowed_cors: set[str] = set()
    if settings.app_env != "prod":
        allowed_cors.update({"http://localhost:3000", "http://127.0.0.1:3000"})
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    register_error_handlers(app)
    app.include_router(blogs_router.router)
    app.include_router(categories_router.router)
    app.include_router(themes_router.router)
    app.include_router(pages_router.router)
    return app
