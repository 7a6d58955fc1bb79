"""
Dependencies shared by API handlers.

Services are constructed once in ``create_app`` and stored on
``app.state``; these helpers hand them to route functions via
``Depends``.
"""

from fastapi import Request

from northwind_api.app.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """Return the ``ProductService`` the application was built with."""
    return request.app.state.product_service
