"""
JSON-file collection store.

One JSON document (an array of records) per collection name, loaded in full
and rewritten in full on every mutating call. Collections are cached in
memory after the first load; every read-modify-write runs under a re-entrant
lock per collection name.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Optional

from mockapi.core.errors import NotFoundError, StorageError, ValidationError
from mockapi.domain.collections import COLLECTIONS, CollectionSpec, spec_for

logger = logging.getLogger(__name__)

Record = dict[str, Any]

# Fields an update payload can never overwrite.
_PROTECTED_ON_UPDATE = ("created_at",)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class CollectionStore:
    """Generic record store over a directory of JSON collection files."""

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self._collections: dict[str, list[Record]] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    # -------------------------- lifecycle --------------------------
    def load(self, names: Optional[Iterable[str]] = None) -> None:
        """(Re)read collections from disk, replacing whatever is resident."""
        for name in names if names is not None else COLLECTIONS:
            with self.locked(name):
                self._collections[name] = self._read(spec_for(name))

    def flush(self, names: Optional[Iterable[str]] = None) -> None:
        """Write resident collections back to disk."""
        for name in list(names if names is not None else self._collections):
            with self.locked(name):
                records = self._collections.get(name)
                if records is not None:
                    self._write(spec_for(name), records)

    def is_resident(self, name: str) -> bool:
        return name in self._collections

    @contextmanager
    def locked(self, name: str) -> Iterator[None]:
        with self._locks_guard:
            lock = self._locks.setdefault(name, threading.RLock())
        with lock:
            yield

    # -------------------------- file io --------------------------
    def path_for(self, name: str) -> Path:
        return self.data_dir / spec_for(name).filename

    def _ensure_file(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            path.write_text("[]", encoding="utf-8")

    def _read(self, spec: CollectionSpec) -> list[Record]:
        path = self.data_dir / spec.filename
        try:
            self._ensure_file(path)
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.exception("Could not read collection %s from %s", spec.name, path)
            raise StorageError(f"Failed to read collection {spec.name}", detail=str(exc)) from exc
        if not content.strip():
            return []
        try:
            data = json.loads(content)
        except ValueError:
            logger.warning("Collection file %s is not valid JSON; treating as empty", path)
            return []
        if not isinstance(data, list):
            logger.warning("Collection file %s does not hold an array; treating as empty", path)
            return []
        logger.debug("Loaded %d records from %s", len(data), path)
        return data

    def _write(self, spec: CollectionSpec, records: list[Record]) -> None:
        path = self.data_dir / spec.filename
        payload = json.dumps(records, ensure_ascii=False, indent=2)
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{spec.filename}.", dir=path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.exception("Could not write collection %s to %s", spec.name, path)
            raise StorageError(f"Failed to save collection {spec.name}", detail=str(exc)) from exc
        logger.debug("Wrote %d records to %s", len(records), path)

    # -------------------------- primitives --------------------------
    def get_collection(self, name: str) -> list[Record]:
        """
        Return the resident list for ``name``, loading it on first access.

        The list is returned by reference: callers that mutate records in
        place and then call save_collection() should hold ``locked(name)``.
        """
        with self.locked(name):
            records = self._collections.get(name)
            if records is None:
                records = self._read(spec_for(name))
                self._collections[name] = records
            return records

    def save_collection(self, name: str, records: Iterable[Record]) -> None:
        """Overwrite the whole stored collection."""
        spec = spec_for(name)
        with self.locked(name):
            snapshot = list(records)
            self._write(spec, snapshot)
            self._collections[name] = snapshot

    def _find_index(self, name: str, item_id: Any) -> int:
        spec = spec_for(name)
        for index, record in enumerate(self.get_collection(name)):
            if spec.identify(record) == item_id:
                return index
        return -1

    def get_item_by_id(self, name: str, item_id: Any) -> Optional[Record]:
        with self.locked(name):
            index = self._find_index(name, item_id)
            if index < 0:
                return None
            return self._collections[name][index]

    def add_item(self, name: str, data: Mapping[str, Any]) -> Record:
        """
        Append a record, assigning the identifying field when absent.

        Server-assigned defaults from the collection spec fill missing keys;
        created_at/updated_at are always set by the store.
        """
        spec = spec_for(name)
        with self.locked(name):
            records = self.get_collection(name)
            taken = {spec.identify(r) for r in records}
            item_id = data.get(spec.id_field)
            if not item_id:
                item_id = spec.new_id()
                while item_id in taken:
                    item_id = spec.new_id()
            elif item_id in taken:
                raise ValidationError(f"{spec.id_field} {item_id} already exists in {name}.")

            item: Record = spec.server_defaults()
            item.update(data)
            item[spec.id_field] = item_id
            if spec.id_field != "id" and "id" not in data:
                item["id"] = item_id
            now = _now_iso()
            item["created_at"] = now
            item["updated_at"] = now

            records.append(item)
            try:
                self._write(spec, records)
            except StorageError:
                records.pop()
                raise
            logger.info("Added %s %s", name, item_id)
            return item

    def update_item(self, name: str, item_id: Any, updates: Mapping[str, Any]) -> Optional[Record]:
        """
        Shallow-merge ``updates`` onto the record. Keys absent from
        ``updates`` are kept; keys present overwrite, ``None`` included.
        The identifying field and created_at are never overwritten.
        """
        spec = spec_for(name)
        with self.locked(name):
            index = self._find_index(name, item_id)
            if index < 0:
                return None
            records = self._collections[name]
            merged = dict(records[index])
            for key, value in updates.items():
                if key == spec.id_field or key in _PROTECTED_ON_UPDATE:
                    continue
                merged[key] = value
            merged["updated_at"] = _now_iso()
            previous = records[index]
            records[index] = merged
            try:
                self._write(spec, records)
            except StorageError:
                records[index] = previous
                raise
            return merged

    def delete_item(self, name: str, item_id: Any) -> bool:
        """Remove by identifying field. Dependent records elsewhere are left in place."""
        spec = spec_for(name)
        with self.locked(name):
            records = self.get_collection(name)
            remaining = [r for r in records if spec.identify(r) != item_id]
            if len(remaining) == len(records):
                return False
            # The resident list is swapped only after the write succeeds.
            self._write(spec, remaining)
            self._collections[name] = remaining
            logger.info("Deleted %s %s", name, item_id)
            return True

    # -------------------------- invariants --------------------------
    def set_default(self, name: str, item_id: Any) -> Record:
        """
        Make ``item_id`` the only record of its scope with the default flag
        set. Every sibling (the target included) is cleared first, then the
        target is flagged, and the collection is written once.

        The new list is built from copies; the resident one is swapped only
        after the write succeeds.
        """
        spec = spec_for(name)
        if not spec.has_scope:
            raise ValidationError(f"Collection {name} has no default flag.")
        flag = spec.default_flag
        with self.locked(name):
            current = self.get_item_by_id(name, item_id)
            if current is None:
                raise NotFoundError(f"Record with ID {item_id} not found in {name}.")
            scope = spec.scope_of(current)
            now = _now_iso()
            updated: list[Record] = []
            target: Optional[Record] = None
            for record in self.get_collection(name):
                if spec.scope_of(record) != scope:
                    updated.append(record)
                    continue
                if spec.identify(record) == item_id:
                    record = {**record, flag: True, "updated_at": now}
                    target = record
                elif record.get(flag):
                    record = {**record, flag: False, "updated_at": now}
                elif flag not in record:
                    record = {**record, flag: False}
                updated.append(record)
            self._write(spec, updated)
            self._collections[name] = updated
            logger.info("Set %s %s as default for scope %s", name, item_id, scope)
            return target

    def toggle_favorite(self, name: str, item_id: Any) -> Record:
        spec = spec_for(name)
        if not spec.favorite_flag:
            raise ValidationError(f"Collection {name} has no favorite flag.")
        with self.locked(name):
            target = self.get_item_by_id(name, item_id)
            if target is None:
                raise NotFoundError(f"Record with ID {item_id} not found in {name}.")
            flag = spec.favorite_flag
            return self.update_item(name, item_id, {flag: not target.get(flag)})
