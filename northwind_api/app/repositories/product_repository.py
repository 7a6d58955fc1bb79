"""Product repositories."""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import List

from northwind_api.app.core.db import AppDbContext
from northwind_api.app.schemas.product import ProductRead

logger = logging.getLogger(__name__)


class ProductRepository(ABC):
    """Read access to stored products."""

    @abstractmethod
    async def get_all(self) -> List[ProductRead]:
        """Return every stored product."""


class InMemoryProductRepository(ProductRepository):
    """Repository backed by an ``AppDbContext``."""

    def __init__(self, context: AppDbContext) -> None:
        self._context = context

    async def get_all(self) -> List[ProductRead]:
        """Return all products in id order.

        Errors from the store are not caught here; they reach the
        transport layer unchanged.
        """
        rows = self._context.products()
        logger.debug("Fetched %d products from %r", len(rows), self._context.name)
        return [self._row_to_product_read(row) for row in rows]

    @staticmethod
    def _row_to_product_read(row: sqlite3.Row) -> ProductRead:
        return ProductRead(id=row["id"], name=row["name"], price=row["price"])
