"""
Database definitions and collection constants.
"""
from app.database.databases import products_db

__all__ = ["products_db"]
