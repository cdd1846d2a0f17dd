"""
Request and response schemas for API endpoints.
"""
from app.schemas.product import ProductResponse, SeedResult

__all__ = [
    "ProductResponse",
    "SeedResult",
]
