"""Base service class for business logic."""

from __future__ import annotations

import logging

from catalog_service.infra.logging import get_lazy_logger


class BaseService:
    """Base class for all service classes.

    Loggers:
        - self.logger: Standard logger for INFO/WARNING/ERROR (always evaluated)
        - self._lazy: Lazy logger for DEBUG (zero overhead when DEBUG disabled)

    Example:
        class ProductService(BaseService):
            def __init__(self, session: AsyncSession):
                super().__init__()
                self.session = session

            async def get_product(self, product_id: str) -> Product:
                self.logger.info("Fetching product", extra={"id": product_id})
                ...
    """

    def __init__(self) -> None:
        """Initialize base service with loggers."""
        class_name = self.__class__.__name__
        self.logger = logging.getLogger(class_name)
        self._lazy = get_lazy_logger(class_name)
