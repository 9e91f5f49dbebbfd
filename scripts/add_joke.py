#!/usr/bin/env python3
"""
Add a joke directly into the configured store (SQL when DATABASE_URL is set).

Usage:
  python scripts/add_joke.py --category funnyJoke --joke "..." --response "..." [--create-category]
"""
from __future__ import annotations

import argparse
import sys

from jokebook.core.config import BACKEND_SQL, get_settings
from jokebook.services.store_factory import build_store


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a joke to the jokebook")
    ap.add_argument("--category", required=True, help="Category name (e.g. funnyJoke)")
    ap.add_argument("--joke", required=True, help="Joke prompt text")
    ap.add_argument("--response", required=True, help="Punchline text")
    ap.add_argument("--create-category", action="store_true", help="Register the category when missing")
    args = ap.parse_args()

    settings = get_settings()
    if settings.store_backend != BACKEND_SQL:
        print("[warn] memory backend selected; the joke will not outlive this process")
    store = build_store(settings)
    if args.create_category and args.category not in store.list_categories():
        store.add_category(args.category)
    record = store.add_joke(args.category, args.joke, args.response)
    print("OK: joke added")
    print(f"  Category: {args.category}")
    if record.id is not None:
        print(f"  ID: {record.id}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
