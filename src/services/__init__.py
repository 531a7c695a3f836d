"""Catalog services: storage, generation and queries."""

from src.services.errors import (
    CatalogError,
    DuplicateSkuError,
    GenerationError,
    StoreUnavailableError,
    ValidationError,
)
from src.services.product_generator import ProductGenerator, random_product
from src.services.product_query_service import ProductQueryService
from src.services.product_store import ProductStore

__all__ = [
    "CatalogError",
    "DuplicateSkuError",
    "GenerationError",
    "ProductGenerator",
    "ProductQueryService",
    "ProductStore",
    "StoreUnavailableError",
    "ValidationError",
    "random_product",
]
