"""Client modules for storage and the catalog HTTP API."""

from src.clients.sqlite_client import SqliteClient
from src.clients.catalog_api_client import CatalogApiClient, CatalogApiError, LatestSearch

__all__ = [
    "SqliteClient",
    "CatalogApiClient",
    "CatalogApiError",
    "LatestSearch",
]
