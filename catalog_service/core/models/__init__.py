"""Database models package.

Import all models here so ``Base.metadata`` knows every table before
``create_all`` runs.
"""

from __future__ import annotations

from .product import Product

__all__ = ["Product"]
