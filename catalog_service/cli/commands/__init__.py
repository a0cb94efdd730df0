"""CLI command modules."""

from catalog_service.cli.commands import database, server

__all__ = ["database", "server"]
