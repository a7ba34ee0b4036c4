"""Shared fixtures for core unit tests"""

import pytest

from mdimport.core.pipeline import Importer
from mdimport.crud.memory_repo import MemoryStore


@pytest.fixture(name="store")
def store_fixture():
    """In-memory store with the 'travel' domain already provisioned."""
    s = MemoryStore()
    s.set_domain("travel", "pw")
    return s


@pytest.fixture(name="asset_root")
def asset_root_fixture(tmp_path):
    root = tmp_path / "static"
    root.mkdir()
    return root


@pytest.fixture(name="importer")
def importer_fixture(store, asset_root):
    ids = iter(f"id-{n}" for n in range(1000))
    return Importer(documents=store, blobs=store, asset_root=asset_root, new_id=lambda: next(ids))
