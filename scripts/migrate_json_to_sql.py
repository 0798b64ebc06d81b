"""One-off migration script: JSON data file -> SQL backend."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog_manager.core.config import get_settings
from blog_manager.db.create_tables import create_all
from blog_manager.repositories.json_storage import JsonFileStorage
from blog_manager.repositories.sql_storage import SQLStorage


def migrate(data_file: Path) -> int:
    if not data_file.exists():
        raise SystemExit(f"Data file not found: {data_file}")
    source = JsonFileStorage(data_file)
    create_all()
    copied = 0
    with SQLStorage() as target:
        for key in source.keys():
            value = source.get_item(key)
            if value is None:
                continue
            target.set_item(key, value)
            copied += 1
    return copied


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy every key of a JSON data file into DATABASE_URL")
    ap.add_argument("--data-file", help="JSON data file (default: DATA_FILE setting)")
    args = ap.parse_args()
    data_file = Path(args.data_file) if args.data_file else get_settings().data_file
    copied = migrate(data_file)
    print(f"{copied} key(s) migrated to SQL successfully.")


if __name__ == "__main__":
    main()
