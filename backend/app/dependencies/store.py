"""
Store dependencies for route handlers.
"""
from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.database.connections import Store
from app.services.product_service import ProductService


def get_store(request: Request) -> Store:
    """Dependency returning the store handle opened at startup."""
    return request.app.state.store


def get_product_service(
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> ProductService:
    """Dependency to get ProductService instance."""
    return ProductService(store.collection(settings.products_collection))
