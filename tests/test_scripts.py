"""
Maintenance scripts under scripts/, exercised through their main() functions.
"""
from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

import pytest

from mockapi.repositories.json_storage import CollectionStore

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load(name):
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def seed():
    return _load("seed_collection")


def test_validate_records_rejects_duplicate_ids(seed):
    records = [{"address_id": "A"}, {"address_id": "B"}, {"address_id": "A"}]
    with pytest.raises(SystemExit, match="Duplicate address_id 'A'"):
        seed.validate_records("addresses", records)


def test_validate_records_rejects_missing_id_and_non_arrays(seed):
    with pytest.raises(SystemExit, match="has no 'contact_id'"):
        seed.validate_records("contacts", [{"contact_id": "c1"}, {"first_name": "Ana"}])
    with pytest.raises(SystemExit):
        seed.validate_records("contacts", {"contact_id": "c1"})
    with pytest.raises(SystemExit):
        seed.validate_records("contacts", ["c1"])


def test_validate_records_accepts_unique_ids(seed):
    records = [{"id": "u1"}, {"id": "u2"}]
    assert seed.validate_records("authUsers", records) == records


def test_seed_then_show_then_reset(seed, tmp_path, data_dir, monkeypatch, capsys):
    source = tmp_path / "contacts.json"
    source.write_text(json.dumps([{"contact_id": "c1"}, {"contact_id": "c2"}]), encoding="utf-8")

    monkeypatch.setattr(sys, "argv", ["seed_collection.py", "--collection", "contacts", "--file", str(source)])
    seed.main()
    assert "OK: 2 record(s)" in capsys.readouterr().out
    assert [r["contact_id"] for r in CollectionStore(data_dir).get_collection("contacts")] == ["c1", "c2"]

    monkeypatch.setattr(sys, "argv", ["show_collection.py", "--collection", "contacts", "--id", "c2"])
    _load("show_collection").main()
    assert json.loads(capsys.readouterr().out)["contact_id"] == "c2"

    monkeypatch.setattr(sys, "argv", ["reset_collection.py", "--collection", "contacts", "--yes"])
    _load("reset_collection").main()
    assert "2 record(s) removed" in capsys.readouterr().out
    assert CollectionStore(data_dir).get_collection("contacts") == []


def test_seed_refuses_duplicate_file_without_writing(seed, tmp_path, data_dir, monkeypatch):
    source = tmp_path / "contacts.json"
    source.write_text(json.dumps([{"contact_id": "c1"}, {"contact_id": "c1"}]), encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["seed_collection.py", "--collection", "contacts", "--file", str(source)])
    with pytest.raises(SystemExit):
        seed.main()
    assert not (data_dir / "contacts.json").exists()
