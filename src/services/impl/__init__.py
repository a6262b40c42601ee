"""Services implementation package."""

from .catalog_service import ProductCatalogService

__all__ = ["ProductCatalogService"]
