"""
Product model for the products collection.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """
    Product document model for MongoDB products collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as hex string")
    kind: str = Field(..., description="Product category label (e.g. 'orange')")
    count: int = Field(..., ge=0, description="Quantity in stock")

    class Config:
        populate_by_name = True

    def to_document(self) -> dict:
        """Document to insert; the store assigns _id."""
        return self.model_dump(exclude={"id"})
