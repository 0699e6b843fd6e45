from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote mockapi seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mockapi.core import config as core_config  # noqa: E402
from mockapi.repositories.json_storage import CollectionStore  # noqa: E402


@pytest.fixture()
def data_dir(tmp_path, monkeypatch):
    """Points MOCK_DATA_DIR at a temporary directory and resets cached settings."""
    target = tmp_path / "json-data"
    monkeypatch.setenv("MOCK_DATA_DIR", str(target))
    monkeypatch.setenv("APP_ENV", "test")
    core_config.get_settings.cache_clear()
    yield target
    core_config.get_settings.cache_clear()


@pytest.fixture()
def store(data_dir):
    return CollectionStore(data_dir)


@pytest.fixture()
def org_addresses(store):
    """Three addresses of org-1: A is the default."""
    for address_id, is_default in (("A", True), ("B", False), ("C", False)):
        store.add_item(
            "addresses",
            {
                "address_id": address_id,
                "addressable_id": "org-1",
                "addressable_type": "ORGANIZATION",
                "address_line_1": f"{address_id} street",
                "city": "Lisbon",
                "is_default": is_default,
            },
        )
    return store
