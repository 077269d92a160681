"""Command-line interface for Curator.

This module provides the CLI commands for running and managing
the Curator service.
"""

import asyncio
import json
from typing import NoReturn

import click
from sqlalchemy.exc import SQLAlchemyError

from curator import __version__
from curator.core.config import get_settings
from curator.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="Curator")
def cli() -> None:
    """Curator - recommendations and the collections that curate them.

    Settings are read from CURATOR_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Curator server (0.0.0.0:8000 by default)."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Curator server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "curator.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-db")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create all database tables.

    Use this only in development. In production, use migrations instead.
    """
    from curator.infrastructure.persistence import models  # noqa: F401
    from curator.infrastructure.persistence.database import get_db_manager

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def seed(path: str) -> None:
    """Insert users, recommendations, collections and memberships from a JSON file."""
    from curator.infrastructure.persistence.database import get_db_manager
    from curator.infrastructure.persistence.seed import FixtureError, load_fixture

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        click.echo(f"Error: {path} is not valid JSON: {e}", err=True)
        raise SystemExit(1)

    async def load() -> None:
        db = get_db_manager()
        try:
            async with db.session() as session:
                result = await load_fixture(session, data)
            click.echo(
                f"Loaded {result.users} users, {result.recommendations} recommendations, "
                f"{result.collections} collections, "
                f"{result.collection_recommendations} memberships."
            )
        except FixtureError as e:
            click.echo(f"Error: {e.message}", err=True)
            logger.error("Fixture rejected", path=path, error=e.message)
            raise SystemExit(1)
        except SQLAlchemyError as e:
            # Duplicate or dangling ids; the session rolled back
            cause = getattr(e, "orig", None) or e
            click.echo(f"Error: fixture could not be stored: {cause}", err=True)
            logger.error("Fixture insert failed", path=path, error=str(e))
            raise SystemExit(1)
        finally:
            await db.disconnect()

    asyncio.run(load())


@cli.command()
def schema() -> None:
    """Print the entity graph: keys, references and delete rules."""
    from curator.infrastructure.persistence.schema_graph import cascade_targets, get_schema_graph

    graph = get_schema_graph()
    for entity in graph.values():
        click.echo(f"{entity.name} ({entity.table})")
        click.echo(f"  primary key: {', '.join(entity.primary_key)}")
        for fk in entity.foreign_keys:
            click.echo(
                f"  {fk.column} -> {fk.target_table}.{fk.target_column}"
                f" on delete {fk.on_delete or 'NO ACTION'}"
            )
        cascades = cascade_targets(graph, entity.table)
        if cascades:
            click.echo(f"  deleting removes rows from: {', '.join(cascades)}")


@cli.command()
def info() -> None:
    """Display Curator configuration."""
    settings = get_settings()

    click.echo(f"""
Curator v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix or '/'}
  Page Size:    {settings.default_page_size}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Pool Size:    {settings.db_pool_size}
  SSL:          {settings.db_ssl}
  Echo:         {settings.db_echo}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the ``curator`` command and ``python -m curator``."""
    cli()


if __name__ == "__main__":
    main()
