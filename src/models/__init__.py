"""Data models module."""

from src.models.generation_result import GenerationResult, InsertOutcome
from src.models.product import NewProduct, Product

__all__ = ["GenerationResult", "InsertOutcome", "NewProduct", "Product"]
