"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from sqlmodel import Session

from mdimport.config import Settings, load_config
from mdimport.core.pipeline import Importer
from mdimport.crud.database import init_db, make_engine
from mdimport.crud.documents import get_by_slug, list_documents, list_domains
from mdimport.crud.sql_repo import SQLStore
from mdimport.errors import ImportFailure
from mdimport.logs import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    debug: Annotated[bool, typer.Option("--debug", help="Log at DEBUG level")] = False,
    ):
    """Configure process-wide logging before any command runs."""
    settings = _settings()
    configure_logging("DEBUG" if debug else settings.log_level)


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize database schema. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine, reset=reset)
    if reset:
        typer.echo("Existing data cleared.")
    typer.echo(f"Database initialized at: {settings.db_url}")


def import_cmd(
    path: Annotated[str, typer.Argument(help="Import folder: one subdirectory per group of .md files")],
    domain: Annotated[Optional[str], typer.Option("--domain", help="Target domain (default: subdirectory name)")] = None,
    assets: Annotated[Optional[str], typer.Option("--asset-root", help="Directory local image links resolve against")] = None,
    keep_going: Annotated[bool, typer.Option("--keep-going", help="Continue past files that fail to import")] = False,
    ):
    """Import every markdown file under PATH, storing local jpg/jpeg images as blobs."""
    settings = _settings(overrides={"domain": domain, "asset_root": assets})
    root = Path(path)
    if not root.is_dir():
        _fail(f"Not a directory: {path}")

    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        store = SQLStore(session)
        importer = Importer(
            documents=store,
            blobs=store,
            asset_root=Path(settings.asset_root),
            domain_password=settings.domain_password,
            intro_text=settings.intro_text,
        )
        try:
            counts, changes = importer.import_dir(root, settings.domain, keep_going)
        except ImportFailure as e:
            _fail("Import failed", e)

    for status, name in changes:
        typer.echo(f"  {status}: {name}")
    typer.echo(f"Import complete - {counts['imported']} imported, {counts['failed']} failed")


def domain_cmd(
    name: Annotated[str, typer.Argument(help="Domain name")],
    password: Annotated[Optional[str], typer.Option("--password", help="Domain password")] = None,
    ):
    """Create a domain, or reset the password of an existing one."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        try:
            SQLStore(session).set_domain(name, password or settings.domain_password)
        except ImportFailure as e:
            _fail("Domain update failed", e)
    typer.echo(f"Domain '{name}' ready.")


def list_cmd(
    domain: Annotated[Optional[str], typer.Option("--domain", help="Only list documents in this domain")] = None,
    domains: Annotated[bool, typer.Option("--domains", help="List domain names instead of documents")] = False,
    ):
    """List slugs of imported documents, or the known domains."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        if domains:
            lines = list_domains(session)
        else:
            lines = [f"{d.domain}\t{d.slug}" for d in list_documents(session, domain)]
    if not lines:
        typer.echo("No domains found in database." if domains else "No documents found in database.")
        raise typer.Exit(1)
    for line in lines:
        typer.echo(line)


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Document slug, e.g. 2020-05-01-trip.md")],
    ):
    """Print the body of the most recent import with SLUG."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        docs = get_by_slug(session, slug)
        body = docs[-1].data if docs else None
    if body is None:
        _fail(f"No document with slug '{slug}'")
    typer.echo(body, nl=False)
