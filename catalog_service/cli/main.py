"""Main CLI entry point for catalog-service management commands."""

import click

from catalog_service.cli.commands import database, server
from catalog_service.infra.logging import setup_logging


@click.group()
@click.version_option(package_name="catalog-service", prog_name="catalog-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Catalog Service CLI - Management commands for the product catalog API.

    \b
    Command Groups:
      db         Database initialization and seeding
      server     Run the API server

    \b
    Quick Start:
      catalog-service db init                 # Test connection, create tables
      catalog-service db seed --count 100000  # Load sample products
      catalog-service server run --reload     # Start a development server
    """
    ctx.ensure_object(dict)


cli.add_command(database.db)
cli.add_command(server.server)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
