# storefront/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Registered customer.

    Identity:
      - id: opaque UUID, also the JWT "sub" claim

    Credentials:
      - password_hash: argon2 hash, never returned by the API
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=50,
        description="Customer display name",
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login email (stored lowercased)",
    )

    password_hash: str

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
