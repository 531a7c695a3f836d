"""HTTP controller for catalog listing, search and generation."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt

from src.services import (
    GenerationError,
    ProductGenerator,
    ProductQueryService,
    ProductStore,
    StoreUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


class GenerateRequest(BaseModel):
    """Incoming generation request; count falls back to the configured default."""

    count: Optional[StrictInt] = Field(default=None, ge=0)


class ProductResponse(BaseModel):
    """Outgoing product record."""

    id: int
    name: str
    description: str
    category: str
    brand: str
    price: float
    stock_quantity: int
    sku: str


class MessageResponse(BaseModel):
    message: str


class CountResponse(BaseModel):
    count: int


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def get_generator(request: Request) -> ProductGenerator:
    return request.app.state.generator


def get_query_service(request: Request) -> ProductQueryService:
    return request.app.state.query_service


@router.post("/generate", response_model=MessageResponse)
def generate_products(
    body: Optional[GenerateRequest] = None,
    generator: ProductGenerator = Depends(get_generator),
):
    """Generate a batch of random products and add them to the catalog."""
    count = body.count if body is not None else None
    try:
        result = generator.generate_batch(count)
    except ValidationError as e:
        logger.info(f"Rejected generation request: {e}")
        return _error(400, str(e))
    except GenerationError:
        logger.exception("Product generation failed")
        return _error(500, "Failed to generate products")

    return MessageResponse(message=result.describe())


@router.get("", response_model=List[ProductResponse])
def list_products(
    query_service: ProductQueryService = Depends(get_query_service),
):
    """Return all products sorted by name."""
    try:
        products = query_service.list_all()
    except StoreUnavailableError:
        logger.exception("Failed to fetch products")
        return _error(500, "Failed to fetch products")
    return [product.to_dict() for product in products]


@router.get("/search", response_model=List[ProductResponse])
def search_products(
    q: str = Query(default=""),
    query_service: ProductQueryService = Depends(get_query_service),
):
    """Search products; an empty query returns the full listing."""
    try:
        products = query_service.search(q)
    except StoreUnavailableError:
        logger.exception(f"Failed to search products for {q!r}")
        return _error(500, "Failed to search products")
    return [product.to_dict() for product in products]


@router.get("/count", response_model=CountResponse)
def count_products(store: ProductStore = Depends(get_store)):
    try:
        count = store.count_all()
    except StoreUnavailableError:
        logger.exception("Failed to count products")
        return _error(500, "Failed to count products")
    return CountResponse(count=count)


@router.delete("", response_model=MessageResponse)
def delete_all_products(store: ProductStore = Depends(get_store)):
    """Remove every product from the catalog."""
    try:
        deleted = store.delete_all()
    except StoreUnavailableError:
        logger.exception("Failed to delete products")
        return _error(500, "Failed to delete products")
    return MessageResponse(message=f"Deleted {deleted} products")


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: int, store: ProductStore = Depends(get_store)):
    try:
        deleted = store.delete_by_id(product_id)
    except StoreUnavailableError:
        logger.exception(f"Failed to delete product {product_id}")
        return _error(500, "Failed to delete product")
    if not deleted:
        return _error(404, f"Product {product_id} not found")
    return MessageResponse(message=f"Deleted product with ID: {product_id}")
