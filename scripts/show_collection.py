#!/usr/bin/env python3
"""
Mostrar o conteudo de uma colecao do mock store.

Uso:
  python scripts/show_collection.py --collection addresses [--id mock-addr-123]
"""
from __future__ import annotations

import argparse
import json

from mockapi.core.config import get_settings
from mockapi.repositories.json_storage import CollectionStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Print the records of a mock collection")
    ap.add_argument("--collection", required=True, help="Collection name, e.g. addresses or authUsers")
    ap.add_argument("--id", help="Print only the record with this identifying value")
    ap.add_argument("--data-dir", help="Override MOCK_DATA_DIR")
    args = ap.parse_args()

    store = CollectionStore(args.data_dir or get_settings().data_dir)
    if args.id:
        record = store.get_item_by_id(args.collection, args.id)
        if record is None:
            raise SystemExit(f"{args.collection}: '{args.id}' not found")
        print(json.dumps(record, ensure_ascii=False, indent=2))
        return
    records = store.get_collection(args.collection)
    print(json.dumps(records, ensure_ascii=False, indent=2))
    print(f"# {len(records)} record(s) in {store.path_for(args.collection)}")


if __name__ == "__main__":
    main()
