from __future__ import annotations
from abc import ABC, abstractmethod
from mdimport.crud.models import Document


class DocumentStore(ABC):
    @abstractmethod
    def save(self, doc: Document) -> None:
        """Persist doc. Raise DocumentPersistFailure if it is rejected (e.g. unknown domain)."""
        raise NotImplementedError

    @abstractmethod
    def set_domain(self, name: str, password: str) -> None:
        """Create domain name, or reset its password if it exists."""
        raise NotImplementedError


class BlobStore(ABC):
    @abstractmethod
    def save_blob(self, blob_id: str, filename: str, data: bytes) -> None:
        """Store data under blob_id. Saving an existing id is a no-op. Raise BlobPersistFailure on rejection."""
        raise NotImplementedError
