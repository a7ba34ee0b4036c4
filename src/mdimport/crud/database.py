"""Engine construction and schema setup"""

from sqlmodel import SQLModel, create_engine

from mdimport.crud import models  # noqa: F401  registers tables


def make_engine(db_url: str):
    return create_engine(db_url, echo=False)


def init_db(engine, reset: bool = False) -> None:
    """Create all tables; with reset, drop them first."""
    if reset:
        SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
