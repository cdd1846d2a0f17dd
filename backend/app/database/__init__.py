"""
Database module - MongoDB connection and database definitions.
"""
from app.database.connections import Store, connect_store, create_mongo_client
from app.database.databases import products_db

__all__ = [
    "Store",
    "connect_store",
    "create_mongo_client",
    "products_db",
]
