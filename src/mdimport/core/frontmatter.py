"""Frontmatter codec: extract, strip, and render the +++ TOML block"""

import re
import tomllib

from pydantic import ValidationError

from mdimport.core.models import Frontmatter
from mdimport.errors import MalformedFrontmatter


FRONTMATTER_RE = re.compile(r"\+\+\+(.*?)\+\+\+", re.DOTALL)


def extract_frontmatter(raw: str) -> Frontmatter:
    """Decode the first +++ block of raw into Frontmatter.

    A missing block is a hard failure: the date it carries is needed for the
    document slug. Raises MalformedFrontmatter for a missing block, invalid
    TOML, or values that do not validate (e.g. no date).
    """
    m = FRONTMATTER_RE.search(raw)
    if m is None:
        raise MalformedFrontmatter("No +++ frontmatter block found")
    try:
        data = tomllib.loads(m.group(1))
    except tomllib.TOMLDecodeError as e:
        raise MalformedFrontmatter(f"Invalid TOML frontmatter: {e}") from e
    try:
        return Frontmatter.model_validate(data)
    except ValidationError as e:
        raise MalformedFrontmatter(f"Invalid frontmatter: {e}") from e


def strip_frontmatter(raw: str) -> str:
    """Remove the first +++ block, leaving the rest of raw untouched."""
    return FRONTMATTER_RE.sub("", raw, count=1)


def render_markdown(body: str, fm: Frontmatter) -> str:
    """Prepend title/description and append tags as visible markdown.

    Empty fields produce no output at all; the body is always emitted.
    """
    parts = []
    if fm.title:
        parts.append(f"# {fm.title}\n\n")
    if fm.description:
        parts.append(f"*{fm.description}*\n\n")
    parts.append(f"{body}\n\n")
    if fm.tags:
        parts.append(f"*{','.join(fm.tags)}*\n\n")
    return "".join(parts)
