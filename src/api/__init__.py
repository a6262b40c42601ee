"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, product_router, get_catalog_service, get_query_matcher

__all__ = ["health_router", "product_router", "get_catalog_service", "get_query_matcher"]
