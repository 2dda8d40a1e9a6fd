# storefront/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from storefront.core.auth import get_current_user
from storefront.database import get_session
from storefront.models.user import User
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.user_repo import UserRepository
from storefront.schemas.user import TokenResponse, UserLogin, UserRead, UserRegister
from storefront.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

service = AuthService(UserRepository(), CartRepository())


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserRegister,
    session: Session = Depends(get_session),
):
    """
    Create an account.

    Returns a bearer token and the new profile. 409 if the email is taken.
    """
    return service.register(session, payload)


@router.post("/login", response_model=TokenResponse)
def login(
    payload: UserLogin,
    session: Session = Depends(get_session),
):
    """Exchange email + password for a bearer token."""
    return service.login(session, payload)


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's profile."""
    return current_user
