#!/usr/bin/env python3
"""
Seed the configured store with the sample categories and default themes.

Usage:
  STORAGE_BACKEND=json DATA_FILE=./data.json python scripts/seed_store.py [--reset-themes]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog_manager.core.config import get_settings
from blog_manager.repositories.blog_store import ACTIVE_THEME_KEY, THEMES_STORAGE_KEY, BlogStore
from blog_manager.repositories.storage import build_storage


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed the Blog Manager store")
    ap.add_argument(
        "--reset-themes",
        action="store_true",
        help="Drop stored themes first so the defaults are written again",
    )
    args = ap.parse_args()

    settings = get_settings()
    with BlogStore(build_storage(settings), excerpt_length=settings.excerpt_length) as store:
        if args.reset_themes:
            store.storage.remove_item(THEMES_STORAGE_KEY)
            store.storage.remove_item(ACTIVE_THEME_KEY)
        store.initialize()
        print(f"OK: store seeded ({settings.storage_backend})")
        print(f"  Posts: {len(store.get_all_blogs())}")
        print(f"  Categories: {len(store.get_all_categories())}")
        active = store.get_active_theme()
        print(f"  Themes: {len(store.get_all_themes())} (active: {active.id if active else '-'})")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI entry
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
