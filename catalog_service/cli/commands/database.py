"""Database management commands.

Example:bash
    # Verify connectivity and create tables
    catalog-service db init

    # Load two million products in batches of 10k
    catalog-service db seed --count 2000000 --batch-size 10000
"""

from __future__ import annotations

import random
import string
import sys
import time
from decimal import Decimal
from typing import Any

import click

from catalog_service.cli.utils import coro, error, header, info, success
from catalog_service.features.products.repository import get_product_repository
from catalog_service.infra.database import create_schema, get_async_session, init_database

PROGRESS_EVERY = 100_000


def generate_product_rows(
    start: int,
    count: int,
    rng: random.Random | None = None,
) -> list[dict[str, Any]]:
    """Build column values for ``count`` synthetic products.

    Rows are numbered from ``start + 1``. Prices fall in 0.01-1000.00 and
    stock in 0-999.

    Args:
        start: Number of rows generated before this batch
        count: Rows to generate
        rng: Random source, seeded in tests for repeatable output

    Returns:
        One mapping per product, ready for ``bulk_insert``
    """
    rng = rng or random.Random()
    alphabet = string.ascii_lowercase + string.digits
    rows = []
    for n in range(start + 1, start + count + 1):
        token = "".join(rng.choices(alphabet, k=6))
        rows.append(
            {
                "name": f"Product {n}",
                "description": f"Description for product {n} - {token}",
                "price": Decimal(rng.randint(1, 100_000)).scaleb(-2),
                "stock": rng.randint(0, 999),
            }
        )
    return rows


@click.group(name="db")
def db() -> None:
    """Database management commands."""


@db.command()
@coro
async def init() -> None:
    """Verify database connectivity and create missing tables."""
    info("Initializing database connection...")

    try:
        await init_database()
        await create_schema()
    except Exception as e:
        error(f"Failed to initialize database: {e}")
        sys.exit(1)

    success("Database ready")


@db.command()
@click.option("--count", default=2_000_000, show_default=True, type=click.IntRange(min=1))
@click.option("--batch-size", default=10_000, show_default=True, type=click.IntRange(min=1))
@click.option(
    "--clear/--no-clear",
    default=True,
    show_default=True,
    help="Delete existing products before seeding",
)
@coro
async def seed(count: int, batch_size: int, clear: bool) -> None:
    """Bulk-load generated products for pagination benchmarks."""
    header(f"Seeding {count:,} products")
    start_time = time.perf_counter()
    repo = get_product_repository()

    try:
        await create_schema()

        async with get_async_session() as session:
            if clear:
                info("Emptying product table...")
                deleted = await repo.delete_all(session)
                await session.commit()
                success(f"Cleared {deleted:,} existing products")

            created = 0
            while created < count:
                size = min(batch_size, count - created)
                await repo.bulk_insert(session, generate_product_rows(created, size))
                await session.commit()

                previous, created = created, created + size
                if created // PROGRESS_EVERY != previous // PROGRESS_EVERY or created == count:
                    elapsed = time.perf_counter() - start_time
                    success(
                        f"Created {created:,} / {count:,} products "
                        f"({created / count:.1%}) - {elapsed:.1f}s elapsed"
                    )
    except Exception as e:
        error(f"Seed failed: {e}")
        sys.exit(1)

    success(f"Seed completed in {time.perf_counter() - start_time:.2f}s")
