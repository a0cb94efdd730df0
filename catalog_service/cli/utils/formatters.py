"""Console output for management commands.

Progress lines go to stdout so seed runs can be piped to a file; failures
go to stderr.
"""

from __future__ import annotations

from typing import Any

import click

_STYLES: dict[str, dict[str, Any]] = {
    "success": {"prefix": "✓ ", "fg": "green"},
    "error": {"prefix": "✗ ", "fg": "red", "err": True},
    "info": {"prefix": "ℹ ", "fg": "blue"},
    "header": {"prefix": "\n", "fg": "cyan", "bold": True},
}


def _emit(kind: str, message: str) -> None:
    style = dict(_STYLES[kind])
    click.secho(f"{style.pop('prefix')}{message}", **style)


def success(message: str) -> None:
    """Report a completed step, e.g. a committed seed batch."""
    _emit("success", message)


def error(message: str) -> None:
    """Report a failed command on stderr."""
    _emit("error", message)


def info(message: str) -> None:
    _emit("info", message)


def header(message: str) -> None:
    """Open a section of command output."""
    _emit("header", message)
