# storefront/models/product.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlmodel import SQLModel, Field, Column


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Stock is read-only from the cart's point of view; carts only
    validate against it.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=100,
        index=True,
        description="Display name of the product",
    )

    description: str = ""

    price: float = Field(
        ge=0,
        description="Unit price",
    )

    category: str = Field(
        default="Other",
        index=True,
        description="Open category label, e.g. Electronics",
    )

    images: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON),
        description="Ordered image URLs; the first one is the thumbnail",
    )

    stock: int = Field(
        default=0,
        ge=0,
        description="How many units currently in stock",
    )

    rating: float = Field(default=0, ge=0, le=5)
    reviews: int = Field(default=0, ge=0, description="Review count")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
