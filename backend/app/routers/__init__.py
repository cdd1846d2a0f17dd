"""
API Routers module.
"""
from app.routers import health, products

__all__ = ["health", "products"]
