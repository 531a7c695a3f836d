"""Exceptions raised by the catalog services."""


class CatalogError(Exception):
    """Base class for catalog service errors."""

    pass


class DuplicateSkuError(CatalogError):
    """Raised when an insert collides with an existing SKU.

    The store is left unchanged.
    """

    def __init__(self, sku: str):
        super().__init__(f"Product with SKU '{sku}' already exists")
        self.sku = sku


class StoreUnavailableError(CatalogError):
    """Raised when the product store cannot complete an operation."""

    pass


class GenerationError(CatalogError):
    """Raised when a generation batch was aborted and rolled back."""

    pass


class ValidationError(CatalogError):
    """Raised for invalid caller input such as a negative batch size."""

    pass
