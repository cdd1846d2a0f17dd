"""
Products router serving the seeded catalogue.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from app.dependencies.store import get_product_service
from app.schemas.product import ProductResponse
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])

PRODUCTS_UNAVAILABLE = "Products not available"


@router.get(
    "/",
    response_model=list[ProductResponse],
    summary="List products",
    responses={
        status.HTTP_404_NOT_FOUND: {
            "description": "The store could not be read",
            "content": {"text/plain": {}},
        },
    },
)
async def list_products(
    product_service: ProductService = Depends(get_product_service),
):
    """
    List every product in the collection.

    Returns 404 with a plain-text body when the store cannot be read;
    the failure is logged and the server keeps running.
    """
    try:
        return await product_service.list_products()
    except Exception:
        logger.exception("Failed to list products")
        return PlainTextResponse(
            PRODUCTS_UNAVAILABLE,
            status_code=status.HTTP_404_NOT_FOUND,
        )
