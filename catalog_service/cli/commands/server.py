"""Server management commands."""

from __future__ import annotations

import click
import uvicorn

from catalog_service.cli.utils import info, success
from catalog_service.core.settings import get_app_settings


@click.group(name="server")
def server() -> None:
    """Server management commands."""


@server.command()
@click.option(
    "--host",
    default=None,
    help="Host to bind (default: from settings or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind (default: from settings or 8000)",
)
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["critical", "error", "warning", "info", "debug", "trace"]),
    help="Uvicorn log level",
)
def run(host: str | None, port: int | None, reload: bool, log_level: str) -> None:
    """Run the API server with uvicorn."""
    settings = get_app_settings()
    host = host or settings.host
    port = port or settings.port

    info(f"Server will run at: http://{host}:{port}")
    info(f"Environment: {settings.environment}")
    info(f"Auto-reload: {'enabled' if reload else 'disabled'}")

    success("Starting uvicorn...")
    uvicorn.run(
        "catalog_service.app.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        # The application lifespan installs logging
        log_config=None,
    )
