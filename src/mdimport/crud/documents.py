"""Read-side queries over imported documents and domains"""

from sqlmodel import Session, select

from mdimport.crud.models import Document, Domain


def get_by_slug(session: Session, slug: str) -> list[Document]:
    """Return every Document with the given slug, oldest first (re-imports share a slug)."""
    return list(session.exec(select(Document).where(Document.slug == slug).order_by(Document.created)).all())


def list_documents(session: Session, domain: str = None) -> list[Document]:
    """Return all documents ordered by slug, optionally limited to one domain."""
    stmt = select(Document)
    if domain:
        stmt = stmt.where(Document.domain == domain)
    return list(session.exec(stmt.order_by(Document.slug)).all())


def list_domains(session: Session) -> list[str]:
    """Return sorted domain names."""
    return sorted(session.exec(select(Domain.name)).all())

