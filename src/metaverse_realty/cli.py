#!/usr/bin/env python3
"""
Main CLI entry point for the Metaverse Realty API server.
"""

import os
import sys

import click
import uvicorn

from metaverse_realty import __version__
from metaverse_realty.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="metaverse-realty")
def cli() -> None:
    """Metaverse Realty CLI - run the mock API and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: $METAVERSE_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: $PORT or 4000)",
)
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload for development (default: $METAVERSE_API_RELOAD)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Log level (default: $METAVERSE_LOG_LEVEL or info)",
)
def serve(host: str | None, port: int | None, reload: bool | None, log_level: str | None) -> None:
    """Start the Metaverse Realty API server."""
    from metaverse_realty.config import get_settings

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port
    reload = settings.api_reload if reload is None else reload
    log_level = (log_level or settings.log_level).lower()

    configure_logging(level=log_level, json_output=settings.is_production)

    # The app factory builds its own settings from the environment
    os.environ["METAVERSE_API_PORT"] = str(port)
    os.environ["METAVERSE_LOG_LEVEL"] = log_level.upper()

    logger.info(
        "Starting Metaverse Realty API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        uvicorn.run(
            "metaverse_realty.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from metaverse_realty.graphql.schema import create_schema

    sdl = create_schema().as_str()

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
