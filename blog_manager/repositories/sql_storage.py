"""Key-value backend stored in a single SQL table via SQLAlchemy."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_manager.core.errors import StorageUnavailableError, StorageWriteError
from blog_manager.db.models import StorageItem, ensure_storage_table
from blog_manager.db.session import get_engine, storage_session
from blog_manager.repositories.storage import KeyValueStorage


class SQLStorage(KeyValueStorage):
    """get/set/remove helpers wrapping the SQLAlchemy session.

    The ``storage_items`` table is created on first use, so a fresh
    database needs no separate migration step.
    """

    def __init__(self) -> None:
        self._table_ready = False

    @contextmanager
    def _session(self) -> Iterator[Session]:
        if not self._table_ready:
            ensure_storage_table(get_engine())
            self._table_ready = True
        with storage_session() as session:
            yield session

    def get_item(self, key: str) -> Optional[str]:
        try:
            with self._session() as session:
                item = session.get(StorageItem, key)
                return item.value if item else None
        except (SQLAlchemyError, RuntimeError) as exc:
            raise StorageUnavailableError(str(exc)) from exc

    def set_item(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        try:
            with self._session() as session:
                item = session.get(StorageItem, key)
                if not item:
                    session.add(StorageItem(key=key, value=value, updated_at=now))
                else:
                    item.value = value
                    item.updated_at = now
        except (SQLAlchemyError, RuntimeError) as exc:
            raise StorageWriteError(str(exc)) from exc

    def remove_item(self, key: str) -> None:
        try:
            with self._session() as session:
                session.execute(delete(StorageItem).where(StorageItem.key == key))
        except (SQLAlchemyError, RuntimeError) as exc:
            raise StorageWriteError(str(exc)) from exc

    def keys(self) -> list[str]:
        try:
            with self._session() as session:
                return list(session.execute(select(StorageItem.key)).scalars().all())
        except (SQLAlchemyError, RuntimeError) as exc:
            raise StorageUnavailableError(str(exc)) from exc

    def close(self) -> None:
        try:
            get_engine().dispose()
        except RuntimeError:
            # no DATABASE_URL, so no engine was ever opened
            return
