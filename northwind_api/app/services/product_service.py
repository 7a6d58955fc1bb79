"""
Service layer for products.

``ProductService`` sits between the HTTP endpoints and the repository.
It currently adds nothing of its own: listing products is a straight
delegation to ``ProductRepository.get_all``.
"""

from typing import List

from northwind_api.app.repositories.product_repository import ProductRepository
from northwind_api.app.schemas.product import ProductRead


class ProductService:
    """Service class for reading products."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def get_products(self) -> List[ProductRead]:
        """Return every product exactly as the repository provides it."""
        return await self._repository.get_all()
