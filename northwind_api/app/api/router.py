"""
Top-level API router.

Aggregates the resource routers.  ``create_app`` mounts it under
``/api``, so the product collection is served at ``/api/product``.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/product", tags=["products"])
