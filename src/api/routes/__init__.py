"""API routes package."""

from .health_routes import router as health_router
from .product_routes import router as product_router, get_catalog_service, get_query_matcher

__all__ = ["health_router", "product_router", "get_catalog_service", "get_query_matcher"]
