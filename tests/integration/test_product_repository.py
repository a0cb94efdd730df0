"""Integration tests for ProductRepository listings against SQLite."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest

from catalog_service.core.database import InvalidCursorError, NotFoundError
from catalog_service.core.models import Product
from catalog_service.features.products.repository import ProductRepository

pytestmark = pytest.mark.integration


@pytest.fixture
def repo() -> ProductRepository:
    return ProductRepository()


@pytest.fixture
async def three_products(make_product, base_time) -> list[Product]:
    """A, B and C created one minute apart (C newest)."""
    return [
        await make_product("Product A", created_at=base_time),
        await make_product("Product B", created_at=base_time + timedelta(minutes=1)),
        await make_product("Product C", created_at=base_time + timedelta(minutes=2)),
    ]


class TestOffsetListing:
    """Offset pagination: page numbers plus a total count."""

    async def test_first_page_is_newest_first(self, repo, db_session, three_products):
        result = await repo.list_offset(db_session, page=1, limit=2)

        assert [p.name for p in result.rows] == ["Product C", "Product B"]
        assert result.total == 3
        assert result.page == 1
        assert result.limit == 2
        assert result.total_pages == 2

    async def test_last_page_holds_remainder(self, repo, db_session, three_products):
        result = await repo.list_offset(db_session, page=2, limit=2)

        assert [p.name for p in result.rows] == ["Product A"]
        assert result.total == 3
        assert result.total_pages == 2

    async def test_page_past_end_is_empty_with_true_total(self, repo, db_session, three_products):
        result = await repo.list_offset(db_session, page=3, limit=2)

        assert result.rows == []
        assert result.total == 3
        assert result.total_pages == 2

    async def test_page_beyond_bigint_offset_is_empty(self, repo, db_session, three_products):
        result = await repo.list_offset(db_session, page=10**18, limit=100)

        assert result.rows == []
        assert result.total == 3
        assert result.skip > 2**63

    async def test_empty_table(self, repo, db_session):
        result = await repo.list_offset(db_session, page=1, limit=10)

        assert result.rows == []
        assert result.total == 0
        assert result.total_pages == 0

    async def test_isolation_level_ignored_outside_postgres(self, repo, db_session, three_products):
        result = await repo.list_offset(
            db_session, page=1, limit=10, isolation_level="REPEATABLE READ"
        )

        assert result.total == 3


class TestCursorListing:
    """Keyset pagination: resume after the last id seen."""

    async def test_first_page_reports_next_cursor(self, repo, db_session, three_products):
        a, b, c = three_products

        result = await repo.list_cursor(db_session, limit=2)

        assert [p.id for p in result.rows] == [c.id, b.id]
        assert result.has_next_page is True
        assert result.next_cursor == b.id

    async def test_following_page_starts_after_cursor(self, repo, db_session, three_products):
        a, b, _ = three_products

        result = await repo.list_cursor(db_session, limit=2, cursor=b.id)

        assert [p.id for p in result.rows] == [a.id]
        assert result.has_next_page is False
        assert result.next_cursor is None

    async def test_exact_fit_has_no_next_page(self, repo, db_session, three_products):
        result = await repo.list_cursor(db_session, limit=3)

        assert len(result.rows) == 3
        assert result.has_next_page is False
        assert result.next_cursor is None

    async def test_cursor_at_last_row_returns_empty_page(self, repo, db_session, three_products):
        a, _, _ = three_products

        result = await repo.list_cursor(db_session, limit=2, cursor=a.id)

        assert result.rows == []
        assert result.has_next_page is False

    async def test_deleted_cursor_is_rejected(self, repo, db_session, three_products):
        _, b, _ = three_products
        await repo.delete(db_session, await repo.get_or_raise(db_session, b.id))
        await db_session.commit()

        with pytest.raises(InvalidCursorError) as exc_info:
            await repo.list_cursor(db_session, limit=2, cursor=b.id)

        assert exc_info.value.cursor == b.id
        assert exc_info.value.model_name == "Product"

    async def test_tied_timestamps_traverse_every_row_once(
        self, repo, db_session, make_product, base_time
    ):
        created = [await make_product(f"Tied {i}", created_at=base_time) for i in range(7)]

        seen: list[str] = []
        cursor = None
        pages = 0
        while True:
            result = await repo.list_cursor(db_session, limit=2, cursor=cursor)
            seen.extend(p.id for p in result.rows)
            pages += 1
            if not result.has_next_page:
                break
            cursor = result.next_cursor

        assert pages == 4
        assert sorted(seen) == sorted(p.id for p in created)
        assert len(seen) == len(set(seen))
        # Ties on created_at fall back to id, descending
        assert seen == sorted(seen, reverse=True)

    async def test_cursor_and_offset_agree_on_order(self, repo, db_session, make_product, base_time):
        for i in range(5):
            await make_product(f"Item {i}", created_at=base_time + timedelta(seconds=i % 2))

        offset_ids = [p.id for p in (await repo.list_offset(db_session, page=1, limit=5)).rows]
        first = await repo.list_cursor(db_session, limit=3)
        rest = await repo.list_cursor(db_session, limit=3, cursor=first.next_cursor)

        assert [p.id for p in first.rows] + [p.id for p in rest.rows] == offset_ids

    async def test_rows_inserted_ahead_do_not_shift_later_pages(
        self, repo, db_session, make_product, three_products, base_time
    ):
        a, b, _ = three_products
        await make_product("Newest", created_at=base_time + timedelta(hours=1))

        result = await repo.list_cursor(db_session, limit=2, cursor=b.id)

        assert [p.id for p in result.rows] == [a.id]


class TestCrud:
    """Create, update and delete through the base repository."""

    async def test_create_assigns_id_and_timestamps(self, repo, db_session):
        product = await repo.create(
            db_session, Product(name="Kettle", price=Decimal("24.50"), stock=3)
        )
        await db_session.commit()

        assert product.id
        assert product.created_at is not None
        assert product.updated_at is not None
        assert product.description is None

    async def test_update_changes_only_given_fields(self, repo, db_session, make_product):
        product = await make_product("Lamp", price="10.00", stock=1, description="Desk lamp")
        loaded = await repo.get_or_raise(db_session, product.id)

        updated = await repo.update(db_session, loaded, {"stock": 9})
        await db_session.commit()

        assert updated.stock == 9
        assert updated.name == "Lamp"
        assert updated.description == "Desk lamp"
        assert updated.price == Decimal("10.00")

    async def test_get_or_raise_missing(self, repo, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            await repo.get_or_raise(db_session, "00000000-0000-0000-0000-000000000000")

        assert exc_info.value.model_name == "Product"

    async def test_bulk_insert_and_delete_all(self, repo, db_session):
        rows = [{"name": f"Bulk {i}", "price": Decimal("1.00"), "stock": i} for i in range(4)]

        inserted = await repo.bulk_insert(db_session, rows)
        await db_session.commit()

        assert inserted == 4
        assert await repo.count(db_session) == 4

        deleted = await repo.delete_all(db_session)
        await db_session.commit()

        assert deleted == 4
        assert await repo.count(db_session) == 0
