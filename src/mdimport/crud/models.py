"""Database table definitions for domains, documents, and content-addressed blobs"""

from datetime import datetime

from sqlalchemy import Column, DateTime, LargeBinary, String, Text
from sqlmodel import Field, SQLModel


class Domain(SQLModel, table=True):
    """A password-protected namespace that documents are grouped under"""
    __tablename__ = "domains"
    name: str = Field(primary_key=True)
    password_hash: str = Field(..., sa_column=Column(Text, nullable=False))
    created: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class Document(SQLModel, table=True):
    """An imported markdown document; every import creates a new row"""
    __tablename__ = "documents"
    id: str = Field(primary_key=True)
    slug: str = Field(..., index=True, nullable=False)
    data: str = Field(..., sa_column=Column(Text, nullable=False))
    created: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    domain: str = Field(..., foreign_key="domains.name", index=True, nullable=False)


class Blob(SQLModel, table=True):
    """Gzip-compressed file content keyed by 'sha256-<hex>' of the uncompressed bytes"""
    __tablename__ = "blobs"
    id: str = Field(..., sa_column=Column(String(71), primary_key=True))
    name: str = Field(..., sa_column=Column(Text, nullable=False))
    data: bytes = Field(..., sa_column=Column(LargeBinary, nullable=False))
    created: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
