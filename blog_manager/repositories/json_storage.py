"""
JSON file persistence adapter.

The whole store lives in one JSON object (key -> text value) that is read
on every access and rewritten in full on every write.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import os

from blog_manager.core.config import get_settings
from blog_manager.core.errors import StorageUnavailableError, StorageWriteError
from blog_manager.repositories.storage import KeyValueStorage


class JsonFileStorage(KeyValueStorage):
    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path else get_settings().data_file

    def load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageUnavailableError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageUnavailableError(f"{self.path} does not hold a JSON object")
        return data

    def save(self, data: dict) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise StorageWriteError(f"Cannot write {self.path}: {exc}") from exc

    def _load_for_write(self) -> dict:
        # Never overwrite a file we could not parse
        try:
            return self.load()
        except StorageUnavailableError as exc:
            raise StorageWriteError(str(exc)) from exc

    def get_item(self, key: str) -> Optional[str]:
        value = self.load().get(key)
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value, ensure_ascii=False)

    def set_item(self, key: str, value: str) -> None:
        data = self._load_for_write()
        data[key] = value
        self.save(data)

    def remove_item(self, key: str) -> None:
        data = self._load_for_write()
        if key in data:
            del data[key]
            self.save(data)

    def keys(self) -> list[str]:
        return list(self.load())
