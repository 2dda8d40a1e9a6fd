# storefront/schemas/cart.py
import uuid

from sqlmodel import SQLModel

from storefront.schemas.product import ProductSnapshot


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart.

    Quantity bounds are enforced by the service (400, not 422) so the
    API reports the same error whether the check fails here or on stock.
    """

    product_id: uuid.UUID
    quantity: int = 1


class CartItemUpdate(SQLModel):
    """
    Payload for setting the quantity of a cart line.
    Zero or less removes the line.
    """

    quantity: int


class CartLineRead(SQLModel):
    """One resolved cart line with its subtotal."""

    product: ProductSnapshot
    quantity: int
    subtotal: float


class CartView(SQLModel):
    """
    Client-visible cart, computed from the stored cart on every read.
    """

    items: list[CartLineRead]
    item_count: int
    total: float
