#!/usr/bin/env python3
"""
Substituir uma colecao pelo conteudo de um arquivo JSON (array de registros).

Uso:
  python scripts/seed_collection.py --collection addresses --file fixtures/addresses.json
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from mockapi.core.config import get_settings
from mockapi.domain.collections import spec_for
from mockapi.repositories.json_storage import CollectionStore


def validate_records(collection: str, records: object) -> list[dict]:
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise SystemExit("Seed file must hold a JSON array of objects")
    id_field = spec_for(collection).id_field
    seen: set = set()
    for index, record in enumerate(records):
        value = record.get(id_field)
        if not value:
            raise SystemExit(f"Record #{index} has no '{id_field}'")
        if value in seen:
            raise SystemExit(f"Duplicate {id_field} '{value}'")
        seen.add(value)
    return records


def main() -> None:
    ap = argparse.ArgumentParser(description="Replace a mock collection with records from a JSON file")
    ap.add_argument("--collection", required=True, help="Collection name")
    ap.add_argument("--file", required=True, help="JSON file holding an array of records")
    ap.add_argument("--data-dir", help="Override MOCK_DATA_DIR")
    args = ap.parse_args()

    source = Path(args.file)
    if not source.exists():
        raise SystemExit(f"File '{source}' not found")
    records = validate_records(args.collection, json.loads(source.read_text(encoding="utf-8")))

    store = CollectionStore(args.data_dir or get_settings().data_dir)
    store.save_collection(args.collection, records)
    print(f"OK: {len(records)} record(s) written to {store.path_for(args.collection)}")


if __name__ == "__main__":
    main()
