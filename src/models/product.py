"""Product models for catalog storage."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class NewProduct:
    """A product that has not been stored yet (no id assigned)."""

    name: str
    description: str
    category: str
    brand: str
    price: float
    stock_quantity: int
    sku: str


@dataclass(frozen=True)
class Product:
    """Product data model representing a stored product record."""

    id: int
    name: str
    description: str
    category: str
    brand: str
    price: float
    stock_quantity: int
    sku: str

    def to_dict(self) -> dict:
        return asdict(self)
