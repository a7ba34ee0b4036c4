from dataclasses import dataclass, field

from mdimport.core.utils.hashing import hash_password
from mdimport.crud.models import Document
from mdimport.crud.repo import BlobStore, DocumentStore
from mdimport.errors import DocumentPersistFailure


@dataclass
class MemoryStore(DocumentStore, BlobStore):
    documents: dict[str, Document] = field(default_factory=dict)
    domains: dict[str, str] = field(default_factory=dict)
    blobs: dict[str, tuple[str, bytes]] = field(default_factory=dict)

    def save(self, doc: Document) -> None:
        if doc.domain not in self.domains:
            raise DocumentPersistFailure(f"Domain '{doc.domain}' does not exist")
        self.documents[doc.id] = doc

    def set_domain(self, name: str, password: str) -> None:
        self.domains[name] = hash_password(password)

    def save_blob(self, blob_id: str, filename: str, data: bytes) -> None:
        self.blobs.setdefault(blob_id, (filename, data))
