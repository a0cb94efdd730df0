"""Minimal generic repository for SQLAlchemy models.

Provides basic CRUD operations plus the two listing strategies with
explicit session passing. For complex queries, use the session directly -
this is a convenience, not a cage.

Example:
    from catalog_service.core.database import BaseRepository
    from catalog_service.core.models import Product

    class ProductRepository(BaseRepository[Product]):
        '''Product-specific queries beyond basic CRUD.'''

        async def find_by_name(self, session: AsyncSession, name: str) -> Product | None:
            stmt = select(Product).where(Product.name == name)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    repo = ProductRepository(Product)
    product = await repo.get(session, product_id)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, cast

from sqlalchemy import func, insert, inspect, select

from catalog_service.core.database.exceptions import InvalidCursorError, NotFoundError
from catalog_service.core.database.filters import LimitOffset, OrderBy
from catalog_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

type SortSpec = Sequence[tuple[InstrumentedAttribute[Any], Literal["asc", "desc"]]]


@dataclass(slots=True, frozen=True)
class OffsetPageResult[T]:
    """Offset page container.

    Attributes:
        rows: Items on the requested page (at most ``limit``)
        total: Total count across all pages
        page: Requested page number (1-indexed)
        limit: Page size

    Example:
        result = await repo.paginate_offset(session, stmt, page=2, limit=20, order_by=...)
        print(f"Page {result.page}/{result.total_pages}, {result.total} rows")
    """

    rows: Sequence[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        """ceil(total / limit)."""
        return (self.total + self.limit - 1) // self.limit

    @property
    def skip(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page - 1) * self.limit


@dataclass(slots=True, frozen=True)
class CursorPageResult[T]:
    """Cursor page container.

    Attributes:
        rows: Items after the cursor (at most ``limit``)
        has_next_page: Whether another page follows
        next_cursor: Primary key of the last row, set only when has_next_page
    """

    rows: Sequence[T]
    has_next_page: bool
    next_cursor: str | None = None


class BaseRepository[T]:
    """Minimal generic repository for CRUD operations and pagination.

    Provides:
        - get(session, id) -> T | None
        - get_or_raise(session, id) -> T (raises NotFoundError)
        - create(session, instance) -> T
        - update(session, instance, values) -> T
        - delete(session, instance) -> None
        - bulk_insert(session, rows) -> int
        - count(session) -> int
        - paginate_offset(session, statement, page, limit, order_by) -> OffsetPageResult[T]
        - paginate_cursor(session, statement, limit, cursor, order_by) -> CursorPageResult[T]

    Session is always explicit - no hidden state. Transactions are the
    caller's business; write methods flush but never commit.
    """

    __slots__ = ("model", "_logger", "_lazy")

    def __init__(self, model: type[T]) -> None:
        """Initialize repository with model class.

        Args:
            model: SQLAlchemy model class (e.g., Product)
        """
        self.model = model
        # Standard logger for INFO/WARNING/ERROR
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        # Lazy logger for DEBUG (zero overhead when DEBUG disabled)
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(self, session: AsyncSession, id: Any) -> T | None:  # noqa: A002
        """Get entity by primary key.

        Args:
            session: Database session
            id: Primary key value

        Returns:
            Entity if found, None otherwise
        """
        instance = await session.get(self.model, id)

        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def get_or_raise(self, session: AsyncSession, id: Any) -> T:  # noqa: A002
        """Get entity by primary key or raise NotFoundError.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        instance = await self.get(session, id)
        if instance is None:
            self._logger.info(
                "Entity not found",
                extra={
                    "entity": self.model.__name__,
                    "id": str(id),
                    "operation": "db.get_or_raise",
                },
            )
            raise NotFoundError(self.model.__name__, {"id": id})
        return instance

    async def create(self, session: AsyncSession, instance: T) -> T:
        """Persist a new entity.

        Adds to session, flushes to get generated values (id, timestamps),
        and refreshes to ensure instance is up-to-date.

        Args:
            session: Database session
            instance: Entity instance to persist

        Returns:
            Persisted entity with generated fields populated
        """
        session.add(instance)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.create: {self.model.__name__}(id={entity_id})")
        return instance

    async def update(
        self,
        session: AsyncSession,
        instance: T,
        values: Mapping[str, Any],
    ) -> T:
        """Apply attribute changes to a loaded entity.

        Args:
            session: Database session
            instance: Entity previously loaded in this session
            values: Attribute names mapped to their new values

        Returns:
            Refreshed entity (server-side values such as updated_at reloaded)
        """
        if not values:
            return instance

        for key, value in values.items():
            setattr(instance, key, value)
        await session.flush()
        await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(
            lambda: f"db.update: {self.model.__name__}(id={entity_id}) fields={sorted(values)}"
        )
        return instance

    async def delete(self, session: AsyncSession, instance: T) -> None:
        """Delete an entity.

        Args:
            session: Database session
            instance: Entity to delete
        """
        entity_id = getattr(instance, "id", None)
        await session.delete(instance)
        await session.flush()

        self._logger.info(
            "Entity deleted",
            extra={"entity": self.model.__name__, "id": str(entity_id), "operation": "db.delete"},
        )

    async def bulk_insert(
        self,
        session: AsyncSession,
        rows: Sequence[Mapping[str, Any]],
    ) -> int:
        """High-performance bulk insert using SQLAlchemy Core.

        Bypasses ORM unit-of-work overhead; column defaults (id, timestamps)
        still fire per row. Does not return instances.

        Args:
            session: Database session
            rows: Column values, one mapping per row

        Returns:
            Number of rows inserted
        """
        if not rows:
            return 0

        await session.execute(insert(self.model), [dict(row) for row in rows])

        self._lazy.debug(lambda: f"db.bulk_insert: {self.model.__name__} -> {len(rows)} rows")
        return len(rows)

    async def count(self, session: AsyncSession, statement: Select[Any] | None = None) -> int:
        """Count rows matched by a statement (all rows when omitted)."""
        if statement is None:
            statement = select(self.model)
        count_stmt = select(func.count()).select_from(statement.order_by(None).subquery())
        return (await session.execute(count_stmt)).scalar_one()

    async def paginate_offset(
        self,
        session: AsyncSession,
        statement: Select[tuple[T]],
        *,
        page: int,
        limit: int,
        order_by: SortSpec,
        isolation_level: str | None = None,
    ) -> OffsetPageResult[T]:
        """Execute an offset-paginated query with total count.

        The count and the window are read in the same transaction. On
        PostgreSQL that transaction is started at ``isolation_level`` when
        the session has not begun one yet, so both reads see one snapshot.

        Args:
            session: Database session
            statement: SQLAlchemy select statement (filters applied, no ordering)
            page: 1-based page number
            limit: Page size
            order_by: List of (column, direction) tuples; last column unique
            isolation_level: Snapshot isolation level, e.g. "REPEATABLE READ"

        Returns:
            OffsetPageResult with rows, total and page info

        Example:
            result = await repo.paginate_offset(
                session,
                select(Product),
                page=2,
                limit=10,
                order_by=[(Product.created_at, "desc"), (Product.id, "desc")],
            )
        """
        await self._begin_snapshot(session, isolation_level)

        total = await self.count(session, statement)

        skip = (page - 1) * limit
        rows: Sequence[T] = []
        # Past the end there is nothing to fetch; also keeps OFFSET within BIGINT
        if skip < total:
            ordered = OrderBy([col for col, _ in order_by], [dir_ for _, dir_ in order_by]).apply(
                statement
            )
            windowed = LimitOffset(limit=limit, offset=skip).apply(ordered)
            rows = (await session.execute(windowed)).scalars().all()

        result = OffsetPageResult(rows=rows, total=total, page=page, limit=limit)
        self._lazy.debug(
            lambda: f"db.paginate_offset: {self.model.__name__}(page={page}, limit={limit}) -> {len(rows)}/{total} items, page {page}/{result.total_pages}"
        )
        return result

    async def paginate_cursor(
        self,
        session: AsyncSession,
        statement: Select[tuple[T]],
        *,
        limit: int,
        cursor: str | None = None,
        order_by: SortSpec,
    ) -> CursorPageResult[T]:
        """Execute a cursor-paginated (keyset) query.

        The cursor is the primary key of the last row of the previous page.
        It is resolved to that row's sort key in this session, then the
        query seeks strictly past it, fetching ``limit + 1`` rows to detect
        a further page.

        Args:
            session: Database session
            statement: SQLAlchemy select statement (without pagination)
            limit: Page size
            cursor: Primary key of the last row seen (None for first page)
            order_by: List of (column, direction) tuples; last column unique

        Returns:
            CursorPageResult with rows, has_next_page and next_cursor

        Raises:
            InvalidCursorError: If the cursor row no longer exists

        Example:
            result = await repo.paginate_cursor(
                session,
                select(Product),
                limit=10,
                cursor=request_cursor,
                order_by=[(Product.created_at, "desc"), (Product.id, "desc")],
            )
            if result.has_next_page:
                next_request_cursor = result.next_cursor
        """
        from catalog_service.core.pagination import CursorFilter, CursorPosition

        position: CursorPosition | None = None
        if cursor is not None:
            anchor = await self.get(session, cursor)
            if anchor is None:
                self._logger.info(
                    "Cursor does not resolve",
                    extra={
                        "entity": self.model.__name__,
                        "cursor": cursor,
                        "operation": "db.paginate_cursor",
                    },
                )
                raise InvalidCursorError(self.model.__name__, cursor)
            position = CursorPosition.from_row(anchor, [col for col, _ in order_by])

        cursor_filter = CursorFilter(position=position, order_by=list(order_by), limit=limit)
        result = await session.execute(cursor_filter.apply(statement))
        rows = list(result.scalars().all())

        # Fetched limit + 1 when another page exists
        has_more = len(rows) > limit
        if has_more:
            rows = rows[:limit]

        next_cursor = str(getattr(rows[-1], self._pk_attr().key)) if has_more else None

        self._lazy.debug(
            lambda: f"db.paginate_cursor: {self.model.__name__}(limit={limit}, cursor={cursor}) -> {len(rows)} items, has_next={has_more}"
        )
        return CursorPageResult(rows=rows, has_next_page=has_more, next_cursor=next_cursor)

    async def _begin_snapshot(self, session: AsyncSession, isolation_level: str | None) -> None:
        """Open the session's transaction at a snapshot isolation level.

        Only applies to PostgreSQL and only when no transaction is active;
        otherwise the caller's transaction is reused as is.
        """
        if isolation_level is None or session.in_transaction():
            return
        if session.get_bind().dialect.name != "postgresql":
            return
        await session.connection(execution_options={"isolation_level": isolation_level})
        self._lazy.debug(lambda: f"db.snapshot: {self.model.__name__} at {isolation_level}")

    def _pk_attr(self) -> InstrumentedAttribute[Any]:
        """Get primary key attribute."""
        pk_column = inspect(self.model).primary_key[0]
        return cast("InstrumentedAttribute[Any]", getattr(self.model, pk_column.key))


__all__ = ["BaseRepository", "CursorPageResult", "OffsetPageResult"]
