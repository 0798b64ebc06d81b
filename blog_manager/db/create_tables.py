"""Create the storage table up front: ``python -m blog_manager.db.create_tables``."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .models import ensure_storage_table
from .session import get_engine


def create_all() -> None:
    ensure_storage_table(get_engine())


if __name__ == "__main__":
    try:
        create_all()
        print("storage_items table is ready.")
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to create the storage table: {exc}") from exc
