"""Error kinds raised by the import pipeline and its stores"""


class ImportFailure(Exception):
    """Base class for every failure surfaced by an import."""


class MalformedFrontmatter(ImportFailure, ValueError):
    """The +++ block is missing or does not decode into Frontmatter."""


class AssetUnreadable(ImportFailure):
    """A local image link does not resolve to a readable file."""


class BlobPersistFailure(ImportFailure):
    """The blob store rejected a write."""


class DocumentPersistFailure(ImportFailure):
    """The document store rejected a save or a domain update."""
