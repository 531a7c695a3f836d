"""Product store backed by a single SQLite table.

Provides:
- Keyed storage with SKU uniqueness enforced by the database
- Name-ordered listing and ranked LIKE search
- Explicit transactions for multi-row writes
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..clients import SqliteClient
from ..models import NewProduct, Product
from .errors import DuplicateSkuError, StoreUnavailableError

logger = logging.getLogger(__name__)

# SQL statements
CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    category TEXT NOT NULL DEFAULT '',
    brand TEXT NOT NULL DEFAULT '',
    price REAL NOT NULL CHECK (price >= 0),
    stock_quantity INTEGER NOT NULL CHECK (stock_quantity >= 0),
    sku TEXT NOT NULL UNIQUE
)
"""

CREATE_INDEX_SQL = [
    "CREATE INDEX IF NOT EXISTS idx_products_name ON products(name COLLATE NOCASE)",
    "CREATE INDEX IF NOT EXISTS idx_products_description ON products(description COLLATE NOCASE)",
    "CREATE INDEX IF NOT EXISTS idx_products_category ON products(category COLLATE NOCASE)",
    "CREATE INDEX IF NOT EXISTS idx_products_brand ON products(brand COLLATE NOCASE)",
    "CREATE INDEX IF NOT EXISTS idx_products_sku ON products(sku COLLATE NOCASE)",
]

PRODUCT_COLUMNS = "id, name, description, category, brand, price, stock_quantity, sku"

INSERT_SQL = """
INSERT INTO products (name, description, category, brand, price, stock_quantity, sku)
VALUES (?, ?, ?, ?, ?, ?, ?)
"""

SELECT_ALL_SQL = f"SELECT {PRODUCT_COLUMNS} FROM products ORDER BY name, id"

# Bucket = first field (name, brand, category, sku, description) containing the term.
SEARCH_SQL = f"""
SELECT {PRODUCT_COLUMNS} FROM products
WHERE name LIKE :pattern ESCAPE '\\'
   OR description LIKE :pattern ESCAPE '\\'
   OR category LIKE :pattern ESCAPE '\\'
   OR brand LIKE :pattern ESCAPE '\\'
   OR sku LIKE :pattern ESCAPE '\\'
ORDER BY
    CASE
        WHEN name LIKE :pattern ESCAPE '\\' THEN 1
        WHEN brand LIKE :pattern ESCAPE '\\' THEN 2
        WHEN category LIKE :pattern ESCAPE '\\' THEN 3
        WHEN sku LIKE :pattern ESCAPE '\\' THEN 4
        WHEN description LIKE :pattern ESCAPE '\\' THEN 5
        ELSE 6
    END,
    name,
    id
"""


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term is matched literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _row_to_product(row: sqlite3.Row) -> Product:
    return Product(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        category=row["category"],
        brand=row["brand"],
        price=row["price"],
        stock_quantity=row["stock_quantity"],
        sku=row["sku"],
    )


def _is_sku_conflict(error: sqlite3.IntegrityError) -> bool:
    return "UNIQUE" in str(error) and "products.sku" in str(error)


class ProductStore:
    """Durable product storage with SKU uniqueness and indexed lookup."""

    def __init__(self, db_path: str = "products.db"):
        """Initialize the product store.

        Args:
            db_path: Path to the SQLite database file, or ":memory:".

        Raises:
            StoreUnavailableError: If the database cannot be opened or initialized.
        """
        self._db_path = db_path
        try:
            self._sqlite_client = SqliteClient(db_path)
        except sqlite3.Error as e:
            raise StoreUnavailableError(f"Could not open product database at {db_path}") from e
        self._ensure_table_exists()

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as e:
            logger.error(f"Product store failed to {operation}: {e}")
            raise StoreUnavailableError(f"Product store failed to {operation}") from e

    def _ensure_table_exists(self) -> None:
        """Create the products table and its indexes if they don't exist."""
        with self._store_errors("initialize schema"):
            self._sqlite_client.execute_script([CREATE_TABLE_SQL, *CREATE_INDEX_SQL])
        logger.debug(f"Product table initialized in {self._db_path}")

    @contextmanager
    def transaction(self) -> Iterator["ProductStore"]:
        """Group several store operations into one atomic unit.

        Commits on normal exit; rolls back every write made inside the block
        if an exception escapes it.
        """
        with self._store_errors("run transaction"):
            with self._sqlite_client.transaction():
                yield self

    def insert(self, product: NewProduct) -> int:
        """Insert a new product.

        Args:
            product: Product values without an id.

        Returns:
            The id assigned to the new row.

        Raises:
            DuplicateSkuError: If a product with the same SKU exists.
            StoreUnavailableError: For any other database failure.
        """
        params = (
            product.name,
            product.description,
            product.category,
            product.brand,
            product.price,
            product.stock_quantity,
            product.sku,
        )
        with self._store_errors("insert product"):
            try:
                cursor = self._sqlite_client.execute_write(INSERT_SQL, params)
            except sqlite3.IntegrityError as e:
                if not _is_sku_conflict(e):
                    raise
                logger.debug(f"Rejected duplicate SKU {product.sku}")
                raise DuplicateSkuError(product.sku) from e
        return int(cursor.lastrowid)

    def get_all(self) -> List[Product]:
        """Return every product, sorted by name ascending."""
        with self._store_errors("fetch products"):
            rows = self._sqlite_client.execute_query(SELECT_ALL_SQL)
        return [_row_to_product(row) for row in rows]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get a product by its id, or None if it does not exist."""
        with self._store_errors("fetch product"):
            rows = self._sqlite_client.execute_query(
                f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id = ?",
                (product_id,),
            )
        if not rows:
            return None
        return _row_to_product(rows[0])

    def search(self, term: str) -> List[Product]:
        """Return products containing term in any searchable field, ranked.

        The term is matched literally and case-insensitively. Callers are
        expected to handle blank terms themselves.
        """
        pattern = f"%{escape_like(term)}%"
        with self._store_errors("search products"):
            rows = self._sqlite_client.execute_query(SEARCH_SQL, {"pattern": pattern})
        return [_row_to_product(row) for row in rows]

    def delete_by_id(self, product_id: int) -> int:
        """Delete one product.

        Returns:
            Number of rows deleted (0 or 1).
        """
        with self._store_errors("delete product"):
            cursor = self._sqlite_client.execute_write(
                "DELETE FROM products WHERE id = ?",
                (product_id,),
            )
        if cursor.rowcount:
            logger.info(f"Deleted product {product_id}")
        return cursor.rowcount

    def delete_all(self) -> int:
        """Delete every product and return how many were removed."""
        with self._store_errors("delete products"):
            cursor = self._sqlite_client.execute_write("DELETE FROM products")
        logger.info(f"Deleted {cursor.rowcount} products")
        return cursor.rowcount

    def count_all(self) -> int:
        with self._store_errors("count products"):
            rows = self._sqlite_client.execute_query("SELECT COUNT(*) AS count FROM products")
        return int(rows[0]["count"])

    def close(self) -> None:
        """Close the database connection."""
        self._sqlite_client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
        return False
