# storefront/core/auth.py
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlmodel import Session

from storefront.core.config import get_settings
from storefront.database import get_session
from storefront.models.user import User
from storefront.repositories.user_repo import UserRepository

settings = get_settings()

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

# HTTP Bearer scheme:
# - auto_error=False => a missing header reaches our own 401 below
#   instead of FastAPI's default 403.
bearer_scheme = HTTPBearer(auto_error=False)

user_repo = UserRepository()


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def create_access_token(user_id: uuid.UUID, expires_delta: timedelta | None = None) -> str:
    """
    Issue a signed access token whose "sub" is the user id.

    Defaults to ACCESS_TOKEN_EXPIRE_MINUTES when no expiry is given.
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"sub": str(user_id), "exp": expire}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an access token.

    Verification:
      - signature (JWT_ALG using JWT_SECRET)
      - expiration time (exp)

    Raises:
        HTTPException(401): if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
        )
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> User:
    """
    Resolve the authenticated user from the bearer token.

    Flow:
      1. No Authorization header => 401.
      2. Decode JWT => extract 'sub' and convert it to UUID.
      3. Load the user row; a token for a deleted user is rejected.

    A store outage while loading the user surfaces as 503.

    Raises:
        HTTPException(401): on any of the failures above.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")

    try:
        user_id = uuid.UUID(sub)
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid sub in token",
        )

    user = user_repo.get_by_id(session, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User no longer exists",
        )
    return user
