"""Database dependencies for FastAPI route handlers.

Two-Tier Session Pattern:
-------------------------
1. `get_db_session()` (this module) - FastAPI Dependency
   - Use in route handlers with `Depends(get_db_session)`
   - Session lifecycle tied to HTTP request

2. `get_async_session()` (infra.database) - General Context Manager
   - Use in CLI commands and scripts
   - Framework-agnostic async context manager

Both use the same underlying session factory. Tests override
`get_db_session` to point handlers at an in-memory database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_service.infra.database import get_async_session

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency for database session.

    Yields:
        Database session that is automatically closed after request.

    Example:
        @router.get("/products/{product_id}")
        async def get_product(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_async_session() as session:
        yield session


DbSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
