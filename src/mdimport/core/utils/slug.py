"""Slug generation for imported documents"""

from datetime import date


def build_slug(when: date, filename: str) -> str:
    """Date-prefixed slug, e.g. (2020-05-01, 'trip.md') -> '2020-05-01-trip.md'."""
    return f"{when:%Y-%m-%d}-{filename}"
