# storefront/routers/cart.py
import uuid

from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.core.auth import get_current_user
from storefront.core.config import get_settings
from storefront.core.locks import KeyedLocks
from storefront.database import get_session
from storefront.models.user import User
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import CartView, CartItemCreate, CartItemUpdate
from storefront.services.cart_service import CartService
from storefront.services.product_resolver import ProductResolver

settings = get_settings()

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
# One lock registry per process, shared by every request.
service = CartService(
    cart_repo,
    ProductResolver(product_repo),
    KeyedLocks(timeout=settings.CART_LOCK_TIMEOUT_SECONDS),
)


@router.get("", response_model=CartView)
def get_my_cart(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Get current user's cart.

    Lines for products that no longer exist are omitted.
    """
    return service.project(session, current_user.id)


@router.post("", response_model=CartView)
def add_to_cart(
    payload: CartItemCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Add product to the current user's cart.

    Errors:
      - 404 unknown product
      - 400 quantity < 1 or not enough stock

    Returns the updated cart.
    """
    return service.add_item(
        session,
        current_user.id,
        payload.product_id,
        payload.quantity,
    )


@router.patch("/{product_id}", response_model=CartView)
def update_cart_item(
    product_id: uuid.UUID,
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Set quantity of a product in the cart; 0 removes it.

    Errors:
      - 404 product not in cart
      - 400 not enough stock

    Returns the updated cart.
    """
    return service.update_item(
        session=session,
        user_id=current_user.id,
        product_id=product_id,
        quantity=payload.quantity,
    )


@router.delete("/{product_id}", response_model=CartView)
def remove_cart_item(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Remove a product from the cart (no-op if absent).

    Returns the updated cart.
    """
    return service.remove_item(session, current_user.id, product_id)


@router.delete("", response_model=CartView)
def clear_cart(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Clear the entire cart.

    Returns an empty cart.
    """
    return service.clear_cart(session, current_user.id)
