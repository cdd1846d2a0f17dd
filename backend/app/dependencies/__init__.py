"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.store import get_store, get_product_service

__all__ = [
    "get_store",
    "get_product_service",
]
