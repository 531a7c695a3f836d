"""Synthetic product generation.

Builds batches of random catalog rows and inserts each batch atomically.
Duplicate SKUs are the only per-row failure tolerated inside a batch; any
other store error rolls back the whole batch.
"""

import logging
import random
import time
from typing import Callable, List, Optional

from ..models import GenerationResult, InsertOutcome, NewProduct
from .errors import CatalogError, DuplicateSkuError, GenerationError, ValidationError
from .product_store import ProductStore

logger = logging.getLogger(__name__)

CATEGORIES = [
    "Electronics",
    "Clothing",
    "Books",
    "Home & Garden",
    "Sports",
    "Beauty",
    "Toys",
    "Automotive",
]

BRANDS = [
    "Apple",
    "Samsung",
    "Nike",
    "Adidas",
    "Sony",
    "Microsoft",
    "Google",
    "Amazon",
    "Tesla",
    "Toyota",
]

PRODUCT_NAMES = [
    "Smartphone", "Laptop", "Headphones", "T-Shirt", "Jeans", "Sneakers", "Book", "Tablet",
    "Camera", "Watch", "Backpack", "Sunglasses", "Coffee Maker", "Blender", "Vacuum", "Chair",
]

MIN_PRICE = 10.0
MAX_PRICE = 1010.0
MIN_STOCK = 1
MAX_STOCK = 100

ProductFactory = Callable[[], NewProduct]


def make_sku(brand: str, rng: random.Random) -> str:
    """Brand prefix plus a millisecond clock suffix and a random suffix."""
    prefix = brand[:3].upper()
    millis = int(time.time() * 1000) % 1_000_000
    return f"{prefix}{millis:06d}{rng.randrange(10_000):04d}"


def random_product(rng: Optional[random.Random] = None) -> NewProduct:
    """Generate one random product drawn from the fixed vocabularies."""
    rng = rng or random.Random()
    category = rng.choice(CATEGORIES)
    brand = rng.choice(BRANDS)
    name = rng.choice(PRODUCT_NAMES)

    return NewProduct(
        name=f"{brand} {name}",
        description=f"High-quality {name.lower()} from {brand}. Perfect for everyday use.",
        category=category,
        brand=brand,
        price=round(rng.uniform(MIN_PRICE, MAX_PRICE), 2),
        stock_quantity=rng.randint(MIN_STOCK, MAX_STOCK),
        sku=make_sku(brand, rng),
    )


class ProductGenerator:
    """Produces batches of synthetic products and stores them transactionally."""

    def __init__(
        self,
        store: ProductStore,
        default_count: int = 100,
        max_batch_size: int = 10000,
        product_factory: Optional[ProductFactory] = None,
    ):
        """Initialize the generator.

        Args:
            store: Store that receives the generated rows.
            default_count: Batch size used when the caller gives none.
            max_batch_size: Largest batch accepted in one call.
            product_factory: Callable returning one candidate row. Defaults to
                random_product with a private random source.
        """
        self._store = store
        self._default_count = default_count
        self._max_batch_size = max_batch_size
        if product_factory is None:
            rng = random.Random()
            product_factory = lambda: random_product(rng)  # noqa: E731
        self._product_factory = product_factory

    def _validate_count(self, count: Optional[int]) -> int:
        if count is None:
            return self._default_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError(f"count must be an integer, got {count!r}")
        if count < 0:
            raise ValidationError(f"count must be non-negative, got {count}")
        if count > self._max_batch_size:
            raise ValidationError(
                f"count must not exceed {self._max_batch_size}, got {count}"
            )
        return count

    def _insert_one(self, product: NewProduct) -> InsertOutcome:
        try:
            product_id = self._store.insert(product)
        except DuplicateSkuError:
            return InsertOutcome(sku=product.sku, product_id=None, skipped=True)
        return InsertOutcome(sku=product.sku, product_id=product_id, skipped=False)

    def generate_batch(self, count: Optional[int] = None) -> GenerationResult:
        """Generate and insert a batch of products in one transaction.

        Args:
            count: Number of rows to attempt; None uses the default count.

        Returns:
            GenerationResult with one outcome per attempted row.

        Raises:
            ValidationError: If count is not a non-negative integer within limits.
            GenerationError: If any non-duplicate failure aborted the batch.
        """
        count = self._validate_count(count)
        if count == 0:
            return GenerationResult(requested=0)

        candidates = [self._product_factory() for _ in range(count)]

        outcomes: List[InsertOutcome] = []
        try:
            with self._store.transaction():
                for product in candidates:
                    outcomes.append(self._insert_one(product))
        except CatalogError as e:
            logger.error(
                f"Generation batch of {count} aborted after {len(outcomes)} rows; rolled back: {e}"
            )
            raise GenerationError(f"Failed to generate {count} products") from e

        result = GenerationResult(requested=count, outcomes=outcomes)
        logger.info(
            f"Generated batch: requested={count} inserted={result.inserted_count} "
            f"skipped={result.skipped_count}"
        )
        return result
