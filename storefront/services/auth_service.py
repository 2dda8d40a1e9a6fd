# storefront/services/auth_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from storefront.core.auth import create_access_token, hash_password, verify_password
from storefront.models.user import User
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.user_repo import UserRepository
from storefront.schemas.user import TokenResponse, UserLogin, UserRead, UserRegister

logger = logging.getLogger(__name__)


class AuthService:
    """
    Registration and login.

    Responsibilities:
      - hash and verify passwords
      - issue access tokens
      - create the user's (empty) cart at registration
    """

    def __init__(self, user_repo: UserRepository, cart_repo: CartRepository):
        self.user_repo = user_repo
        self.cart_repo = cart_repo

    def _token_response(self, user: User) -> TokenResponse:
        return TokenResponse(
            token=create_access_token(user.id),
            user=UserRead.model_validate(user),
        )

    def register(self, session: Session, payload: UserRegister) -> TokenResponse:
        """
        Create an account and log it in.

        Raises:
            HTTPException(409): email already registered.
        """
        if self.user_repo.get_by_email(session, payload.email) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Email already registered",
            )

        user = self.user_repo.create(
            session,
            User(
                name=payload.name,
                email=payload.email,
                password_hash=hash_password(payload.password),
            ),
        )
        self.cart_repo.create_empty(session, user.id)
        logger.info("Registered user %s", user.id)
        return self._token_response(user)

    def login(self, session: Session, payload: UserLogin) -> TokenResponse:
        """
        Raises:
            HTTPException(401): unknown email or wrong password (same
            message for both).
        """
        user = self.user_repo.get_by_email(session, payload.email)
        if user is None or not verify_password(payload.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )
        return self._token_response(user)
