"""
Product service for seeding and listing the products collection.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.core.exceptions import DataAccessError
from app.database.databases.products_db import SAMPLE_PRODUCTS
from app.models.product import Product
from app.schemas.product import ProductResponse, SeedResult

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product operations on a single collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialize with the products collection."""
        self.products = collection

    # ==================== Seeding ====================

    async def has_products(self) -> bool:
        """Check whether the collection holds at least one document."""
        return await self.products.find_one({}) is not None

    async def seed_products(self, samples: Optional[list[dict]] = None) -> SeedResult:
        """
        Insert the sample products if the collection is empty.

        Any existing document, related or not, suppresses seeding.
        Insert failures are not caught.
        """
        if await self.has_products():
            logger.info("Collection already exists. Skipping initialization.")
            return SeedResult(skipped=True)

        documents = [
            Product(**sample).to_document()
            for sample in (SAMPLE_PRODUCTS if samples is None else samples)
        ]
        result = await self.products.insert_many(documents)
        inserted_ids = [str(inserted_id) for inserted_id in result.inserted_ids]

        logger.info(f"Initialized {len(inserted_ids)} products")
        for inserted_id in inserted_ids:
            logger.info(f"  Inserted product with ID {inserted_id}")

        return SeedResult(
            skipped=False,
            inserted_count=len(inserted_ids),
            inserted_ids=inserted_ids,
        )

    # ==================== Reading ====================

    async def list_products(self) -> list[ProductResponse]:
        """
        Return every product in store-default cursor order.

        Raises:
            DataAccessError: If the query fails
        """
        try:
            cursor = self.products.find({})
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise DataAccessError(f"Failed to read products: {e}") from e

        return [self._product_to_response(doc) for doc in documents]

    @staticmethod
    def _product_to_response(doc: dict) -> ProductResponse:
        """Project a stored document into the wire shape."""
        return ProductResponse(
            id=str(doc["_id"]),
            kind=doc["kind"],
            count=doc["count"],
        )
