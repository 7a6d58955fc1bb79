"""
Repository layer.

Repositories are the only code that reads from the data context.  The
service layer depends on the ``ProductRepository`` interface, so a
different store can be plugged in without touching services or routes.
"""

from .product_repository import InMemoryProductRepository, ProductRepository

__all__ = ["InMemoryProductRepository", "ProductRepository"]
