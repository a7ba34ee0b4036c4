"""Local image link discovery and literal link rewriting"""

import re


IMAGE_LINK_RE = re.compile(
    r'!\[.*?\]\('                              # alt text on one line
    r'((?:[^()\n]|\([^()\n]*\))*?(?:jpg|jpeg))'   # path; spaces and balanced parens allowed
    r'(?:\s+"[^"\n]*")?\)'                      # optional "title"
)


def find_local_image_links(content: str) -> list[str]:
    """Return jpg/jpeg image paths in document order, skipping anything with 'http'."""
    return [m.group(1) for m in IMAGE_LINK_RE.finditer(content) if "http" not in m.group(1)]


def rewrite_link(content: str, old: str, new: str) -> str:
    """Replace every literal occurrence of old with new."""
    return content.replace(old, new)
