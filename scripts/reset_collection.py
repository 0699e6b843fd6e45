#!/usr/bin/env python3
"""
Esvaziar uma colecao (o arquivo JSON volta a ser []).

Uso:
  python scripts/reset_collection.py --collection contacts --yes
"""
from __future__ import annotations

import argparse

from mockapi.core.config import get_settings
from mockapi.repositories.json_storage import CollectionStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Empty a mock collection")
    ap.add_argument("--collection", required=True, help="Collection name")
    ap.add_argument("--data-dir", help="Override MOCK_DATA_DIR")
    ap.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    args = ap.parse_args()

    store = CollectionStore(args.data_dir or get_settings().data_dir)
    count = len(store.get_collection(args.collection))
    if not args.yes:
        answer = input(f"Remove {count} record(s) from {args.collection}? [y/N] ").strip().lower()
        if answer not in {"y", "yes"}:
            raise SystemExit("Aborted")
    store.save_collection(args.collection, [])
    print(f"OK: {args.collection} reset ({count} record(s) removed)")


if __name__ == "__main__":
    main()
