"""Import orchestration: one markdown document, or a whole import folder"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional
from uuid import uuid4

from mdimport.config import DOMAIN_PASSWORD, INTRO_TEXT
from mdimport.core.blobs import ingest_link
from mdimport.core.frontmatter import extract_frontmatter, render_markdown, strip_frontmatter
from mdimport.core.links import find_local_image_links, rewrite_link
from mdimport.core.utils.slug import build_slug
from mdimport.crud.models import Document
from mdimport.crud.repo import BlobStore, DocumentStore
from mdimport.errors import AssetUnreadable, BlobPersistFailure, DocumentPersistFailure, ImportFailure


def _uuid() -> str:
    return str(uuid4())


def discover_files(root: Path) -> list[tuple[str, Path]]:
    """Return (group, file) pairs for every '*.md*' file one level below root.

    Each immediate subdirectory of root is a group. Files directly under root
    and anything nested deeper are skipped.
    """
    found = []
    for group in sorted(p for p in Path(root).iterdir() if p.is_dir()):
        for p in sorted(group.iterdir()):
            if p.is_file() and ".md" in p.name:
                found.append((group.name, p))
    return found


@dataclass
class Importer:
    """Turns raw markdown files into stored Documents.

    Stores, id generator, clock and logger are injected so that imports can
    run against SQL or in-memory stores and be observed from tests.
    """
    documents:       DocumentStore
    blobs:           BlobStore
    asset_root:      Path
    domain_password: str = DOMAIN_PASSWORD
    intro_text:      str = INTRO_TEXT
    new_id:          Callable[[], str] = _uuid
    clock:           Callable[[], datetime] = datetime.now
    logger:          logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def ingest_links(self, content: str) -> str:
        """Store every local image and rewrite its link; failed links are logged and left as-is."""
        for link in find_local_image_links(content):
            try:
                ref = ingest_link(self.blobs, self.asset_root, link)
            except (AssetUnreadable, BlobPersistFailure) as e:
                self.logger.warning("link not processed %s: %s", link, e)
                continue
            content = rewrite_link(content, link, ref)
        return content

    def save(self, doc: Document) -> None:
        """Save doc, provisioning its domain and retrying once if the first save fails."""
        try:
            self.documents.save(doc)
            return
        except DocumentPersistFailure as e:
            self.logger.warning("%s", e)

        self.logger.warning("creating domain '%s' with temporary password", doc.domain)
        try:
            self.documents.set_domain(doc.domain, self.domain_password)
        except DocumentPersistFailure as e:
            self.logger.error("%s", e)
        self.documents.save(doc)

    def import_document(self, domain: str, filename: str, raw: str) -> Document:
        """Import one markdown file's content into domain and return the saved Document.

        Raises MalformedFrontmatter if the +++ block is missing or invalid, and
        DocumentPersistFailure if the save still fails after the domain retry.
        """
        data = raw.strip()
        if data == self.intro_text.strip():
            data = ""

        fm = extract_frontmatter(data)
        self.logger.debug("frontmatter title=%r date=%s tags=%s", fm.title, fm.date, fm.tags)

        body = self.ingest_links(strip_frontmatter(data))
        body = render_markdown(body, fm)

        slug = build_slug(fm.date, filename)
        doc = Document(
            id=self.new_id(),
            slug=slug,
            data=f"*{slug}*\n\n{body}",
            created=self.clock(),
            domain=domain,
        )
        self.save(doc)
        return doc

    def import_dir(
        self,
        root: Path,
        domain: Optional[str] = None,
        keep_going: bool = False,
        ) -> tuple[dict[str, int], list[tuple[str, str]]]:
        """Import every discovered file under root, one at a time.

        Files go to domain, or to their subdirectory's name when domain is None.
        Returns (counts, changes) where changes holds ('imported', slug) or
        ('failed', path) per file. Without keep_going the first failure is raised.
        """
        counts = {"imported": 0, "failed": 0}
        changes = []
        for group, path in discover_files(root):
            try:
                try:
                    raw = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    raise ImportFailure(f"Failed to read {path}: {e}") from e
                doc = self.import_document(domain or group, path.name, raw)
            except ImportFailure as e:
                if not keep_going:
                    raise
                self.logger.error("import of %s failed: %s", path, e)
                counts["failed"] += 1
                changes.append(("failed", str(path)))
                continue
            self.logger.info("imported %s as %s", path, doc.slug)
            counts["imported"] += 1
            changes.append(("imported", doc.slug))
        return counts, changes
