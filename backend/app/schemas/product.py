"""
Product response schemas.
"""
from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    """Product as returned by GET /."""
    id: str = Field(..., alias="_id", description="Product ID (ObjectId hex string)")
    kind: str = Field(..., description="Product category")
    count: int = Field(..., ge=0, description="Quantity")

    class Config:
        populate_by_name = True


class SeedResult(BaseModel):
    """Outcome of the startup seeding step."""
    skipped: bool = Field(..., description="True when the collection already held data")
    inserted_count: int = Field(default=0, description="Number of inserted documents")
    inserted_ids: list[str] = Field(default=[], description="Generated ObjectIds as hex strings")
