"""
Products API - FastAPI Application

Serves a small product catalogue stored in MongoDB. The collection is
seeded with sample products on first start.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.database.connections import connect_store
from app.routers import health, products
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Open the MongoDB store handle (fails on missing DATABASE_URL)
    - Seed the products collection if it is empty

    Shutdown:
    - Close the store handle
    """
    settings = get_settings()
    logger.info("Starting up Products API...")

    store = await connect_store(settings)
    try:
        service = ProductService(store.collection(settings.products_collection))
        await service.seed_products()
    except Exception:
        store.close()
        raise

    app.state.store = store
    logger.info(f"Running on {settings.port}.")

    yield

    logger.info("Shutting down Products API...")
    store.close()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Build the database-backed application."""
    app = FastAPI(
        title="Products API",
        description="Lists the sample products stored in MongoDB.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(products.router)
    return app


app = create_app()
