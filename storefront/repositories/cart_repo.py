# storefront/repositories/cart_repo.py
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import FlushError
from sqlmodel import Session, select

from storefront.core.errors import Conflict
from storefront.database import storage_guard
from storefront.models.cart import Cart

logger = logging.getLogger(__name__)


class CartRepository:
    """
    Data access layer for cart documents.

    - Whole-document reads and writes only; no per-line updates.
    - `save` is a compare-and-swap on `Cart.version`.
    - No business logic (quantities, stock) lives here.
    """

    def get(self, session: Session, user_id: uuid.UUID) -> Cart:
        """
        Return a detached copy of the user's cart.

        A user without a stored cart gets an empty one (version 0);
        absence is a normal state, not an error.
        """
        with storage_guard(session, "cart read"):
            stmt = (
                select(Cart)
                .where(Cart.user_id == user_id)
                .execution_options(populate_existing=True)
            )
            row = session.exec(stmt).first()
        if row is None:
            return Cart(user_id=user_id, lines=[], version=0)
        return Cart(
            user_id=row.user_id,
            lines=[dict(line) for line in row.lines],
            version=row.version,
            updated_at=row.updated_at,
        )

    def save(self, session: Session, cart: Cart) -> Cart:
        """
        Replace the stored cart with `cart`.

        The write only lands if the stored version still equals
        `cart.version` (the version that was read).

        Raises:
            Conflict: another writer saved in between.
            UpstreamUnavailable: the store could not be reached.
        """
        now = datetime.now(timezone.utc)
        new_version = cart.version + 1

        with storage_guard(session, "cart write"):
            stmt = (
                update(Cart.__table__)
                .where(Cart.user_id == cart.user_id, Cart.version == cart.version)
                .values(lines=cart.lines, version=new_version, updated_at=now)
            )
            result = session.connection().execute(stmt)

            if result.rowcount != 1:
                if cart.version != 0:
                    session.rollback()
                    self._lost_race(cart)
                # Never stored before: first write inserts the document.
                try:
                    session.add(
                        Cart(
                            user_id=cart.user_id,
                            lines=cart.lines,
                            version=new_version,
                            updated_at=now,
                        )
                    )
                    session.flush()
                except (IntegrityError, FlushError):
                    session.rollback()
                    self._lost_race(cart)

            session.commit()

        return Cart(
            user_id=cart.user_id,
            lines=[dict(line) for line in cart.lines],
            version=new_version,
            updated_at=now,
        )

    def clear(self, session: Session, cart: Cart) -> Cart:
        """Save `cart` with every line removed."""
        return self.save(
            session,
            Cart(user_id=cart.user_id, lines=[], version=cart.version),
        )

    def create_empty(self, session: Session, user_id: uuid.UUID) -> Cart:
        """
        Explicitly create an empty cart document (used at registration).
        Does nothing if the user already has one.
        """
        cart = self.get(session, user_id)
        if cart.version > 0:
            return cart
        return self.save(session, cart)

    @staticmethod
    def _lost_race(cart: Cart) -> None:
        logger.warning(
            "Cart write conflict for user %s (read version %s)",
            cart.user_id,
            cart.version,
        )
        raise Conflict()
