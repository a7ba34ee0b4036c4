"""Intermediate data models for the import pipeline"""

from datetime import date as date_type, datetime, time
from typing import Any

from pydantic import BaseModel, field_validator


class Frontmatter(BaseModel):
    """Metadata decoded from a document's +++ block. Unknown keys are ignored."""
    title: str = ""
    description: str = ""
    date: datetime
    tags: list[str] = []

    @field_validator("date", mode="before")
    @classmethod
    def _promote_date(cls, value: Any) -> Any:
        """TOML local dates (2020-05-01) become midnight datetimes."""
        if isinstance(value, date_type) and not isinstance(value, datetime):
            return datetime.combine(value, time())
        return value
