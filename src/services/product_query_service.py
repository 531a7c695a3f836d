"""Read-only catalog queries: listing and ranked search."""

import logging
from typing import List, Optional

from ..models import Product
from .product_store import ProductStore

logger = logging.getLogger(__name__)


class ProductQueryService:
    """Read access to the catalog with deterministic search ranking.

    Search ranks each match by the first field containing the term, in the
    order name, brand, category, sku, description; ties are broken by name.
    """

    def __init__(self, store: ProductStore):
        self._store = store

    def list_all(self) -> List[Product]:
        """Return every product sorted by name ascending."""
        return self._store.get_all()

    def search(self, term: Optional[str]) -> List[Product]:
        """Search products by a case-insensitive substring.

        Args:
            term: Text to look for. None, empty and whitespace-only terms
                return the full listing.

        Returns:
            Matching products, ranked.
        """
        if term is None or not term.strip():
            return self.list_all()

        term = term.strip()
        results = self._store.search(term)
        logger.debug(f"Search for {term!r} matched {len(results)} products")
        return results
