"""SQL backend plumbing: engine, transactional session and the storage table."""

from .models import StorageItem, ensure_storage_table
from .session import Base, get_engine, storage_session

__all__ = ["Base", "StorageItem", "ensure_storage_table", "get_engine", "storage_session"]
