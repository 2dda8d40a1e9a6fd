# storefront/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlmodel import SQLModel, Field, Column


class Cart(SQLModel, table=True):
    """
    One cart document per user.

    `lines` is the whole cart, insertion-ordered:
        [{"product_id": "<uuid>", "quantity": 2}, ...]
    One user cannot have 2 lines for the same product.

    `version` increases on every save and is checked on write, so a
    writer that read a stale cart loses instead of overwriting.
    """

    __tablename__ = "carts"

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        primary_key=True,
    )

    lines: list[dict] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    version: int = Field(default=0, ge=0)

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
