"""비즈니스 로직 서비스 - export only."""

from .impl import ProductCatalogService

__all__ = ["ProductCatalogService"]
