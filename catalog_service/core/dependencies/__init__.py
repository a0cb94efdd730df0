"""FastAPI dependencies for route handlers.

Usage:
    from catalog_service.core.dependencies import DbSessionDep, get_db_session
"""

from catalog_service.core.dependencies.database import DbSessionDep, get_db_session

__all__ = ["DbSessionDep", "get_db_session"]
