"""
Product endpoints.

Only the collection read is exposed: ``GET /api/product`` returns every
product in the store as a JSON array.  There are no query parameters
and no authentication.
"""

from typing import List

from fastapi import APIRouter, Depends

from northwind_api.app.api.deps import get_product_service
from northwind_api.app.schemas.product import ProductRead
from northwind_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=List[ProductRead])
@router.get("/", response_model=List[ProductRead], include_in_schema=False)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    """Return all products."""
    return await service.get_products()
