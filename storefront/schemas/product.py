# storefront/schemas/product.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field


class ProductCreate(SQLModel):
    """
    Payload for inserting a catalog entry (used by the seed fixtures).
    """

    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    price: float = Field(ge=0)
    category: str = "Other"
    images: list[str] = Field(default_factory=list)
    stock: int = Field(default=0, ge=0)
    rating: float = Field(default=0, ge=0, le=5)
    reviews: int = Field(default=0, ge=0)


class ProductRead(ProductCreate):
    """Response schema for catalog endpoints."""

    id: uuid.UUID
    created_at: datetime


class ProductSnapshot(SQLModel):
    """
    Point-in-time copy of the fields a cart needs from a product.

    Not kept in sync after capture; re-resolve to get fresh values.
    """

    id: uuid.UUID
    name: str
    price: float
    stock: int
    category: str
    image: str | None = None
