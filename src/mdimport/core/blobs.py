"""Blob ingestion: read a local asset, content-address it, gzip it, and store it"""

import gzip
import logging
from pathlib import Path

from mdimport.core.utils.hashing import blob_id
from mdimport.crud.repo import BlobStore
from mdimport.errors import AssetUnreadable


UPLOADS_PREFIX = "/uploads/"

logger = logging.getLogger(__name__)


def resolve_asset(asset_root: Path, link: str) -> Path:
    """Join link onto asset_root; site-absolute links ('/img/a.jpg') stay under the root."""
    return Path(asset_root) / link.lstrip("/")


def ingest_link(store: BlobStore, asset_root: Path, link: str) -> str:
    """Store the asset behind link and return its '/uploads/sha256-<hex>' reference.

    Raises AssetUnreadable if the file cannot be read; the store raises
    BlobPersistFailure if it rejects the write. No retry is attempted.
    """
    path = resolve_asset(asset_root, link)
    logger.debug("ingesting %s", path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise AssetUnreadable(f"Cannot read {path}: {e}") from e

    bid = blob_id(raw)
    store.save_blob(bid, path.name, gzip.compress(raw))
    return f"{UPLOADS_PREFIX}{bid}"
