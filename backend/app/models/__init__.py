"""
Pydantic models for database documents.
"""
from app.models.product import Product

__all__ = ["Product"]
