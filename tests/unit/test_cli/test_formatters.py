"""Tests for CLI console output helpers."""

from __future__ import annotations

import pytest

from catalog_service.cli.utils import error, header, info, success


def test_progress_goes_to_stdout(capsys: pytest.CaptureFixture[str]):
    header("Seeding 10 products")
    success("Created 10 / 10 products")
    info("Emptying product table...")

    captured = capsys.readouterr()
    assert captured.out == (
        "\nSeeding 10 products\n✓ Created 10 / 10 products\nℹ Emptying product table...\n"
    )
    assert captured.err == ""


def test_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]):
    error("Seed failed: refused")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "✗ Seed failed: refused\n"
