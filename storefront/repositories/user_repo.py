# storefront/repositories/user_repo.py
import uuid

from sqlmodel import Session, select

from storefront.database import storage_guard
from storefront.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
      - Store failures surface as UpstreamUnavailable
    """

    def get_by_id(self, session: Session, user_id: uuid.UUID) -> User | None:
        """Return a User by primary key, or None if not found."""
        with storage_guard(session, "user read"):
            return session.get(User, user_id)

    def get_by_email(self, session: Session, email: str) -> User | None:
        """Return a User by unique email, or None if not found."""
        stmt = select(User).where(User.email == email)
        with storage_guard(session, "user read"):
            return session.exec(stmt).first()

    def create(self, session: Session, user: User) -> User:
        """Insert a new User and return the persisted row."""
        with storage_guard(session, "user write"):
            session.add(user)
            session.commit()
            session.refresh(user)
        return user
