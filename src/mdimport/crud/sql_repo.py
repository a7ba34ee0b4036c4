from __future__ import annotations
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from mdimport.core.utils.hashing import hash_password
from mdimport.crud.models import Blob, Document, Domain
from mdimport.crud.repo import BlobStore, DocumentStore
from mdimport.errors import BlobPersistFailure, DocumentPersistFailure


class SQLStore(DocumentStore, BlobStore):
    """Document and blob store over one session; every write is committed immediately."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, doc: Document) -> None:
        try:
            if self.session.get(Domain, doc.domain) is None:
                raise DocumentPersistFailure(f"Domain '{doc.domain}' does not exist")
            self.session.add(doc)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DocumentPersistFailure(f"Cannot save document {doc.slug}: {e}") from e
        self.session.refresh(doc)

    def set_domain(self, name: str, password: str) -> None:
        try:
            domain = self.session.get(Domain, name)
            if domain is None:
                domain = Domain(name=name, password_hash=hash_password(password))
            else:
                domain.password_hash = hash_password(password)
            self.session.add(domain)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise DocumentPersistFailure(f"Cannot set domain {name}: {e}") from e

    def save_blob(self, blob_id: str, filename: str, data: bytes) -> None:
        try:
            if self.session.get(Blob, blob_id) is not None:
                return
            self.session.add(Blob(id=blob_id, name=filename, data=data, created=datetime.now()))
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise BlobPersistFailure(f"Cannot save blob {blob_id}: {e}") from e
