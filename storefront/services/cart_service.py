# storefront/services/cart_service.py
import logging
import uuid

from sqlmodel import Session

from storefront.core.errors import (
    InsufficientStock,
    InvalidQuantity,
    LineNotFound,
    ProductNotFound,
)
from storefront.core.locks import KeyedLocks
from storefront.models.cart import Cart
from storefront.repositories.cart_repo import CartRepository
from storefront.schemas.cart import CartLineRead, CartView
from storefront.schemas.product import ProductSnapshot
from storefront.services.product_resolver import ProductResolver

logger = logging.getLogger(__name__)


def _line_map(cart: Cart) -> dict[str, int]:
    """Stored lines as an insertion-ordered {product_id: quantity} map."""
    return {line["product_id"]: line["quantity"] for line in cart.lines}


def _with_lines(cart: Cart, lines: dict[str, int]) -> Cart:
    cart.lines = [
        {"product_id": product_id, "quantity": quantity}
        for product_id, quantity in lines.items()
    ]
    return cart


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - validate product existence against the live catalog
      - enforce 1 <= quantity <= stock on every add and update
      - serialize mutations per user (lock + versioned save)
      - compute line subtotals and cart totals on read

    Every mutation is a read-modify-write of the whole cart and returns
    the refreshed CartView; clients never need to keep their own copy.
    """

    def __init__(
        self,
        cart_repo: CartRepository,
        resolver: ProductResolver,
        locks: KeyedLocks,
    ):
        self.cart_repo = cart_repo
        self.resolver = resolver
        self.locks = locks

    # ---- internal helpers ----

    def _get_product(self, session: Session, product_id: uuid.UUID) -> ProductSnapshot:
        snapshot = self.resolver.resolve(session, product_id)
        if snapshot is None:
            raise ProductNotFound()
        return snapshot

    @staticmethod
    def _check_stock(product: ProductSnapshot, quantity: int) -> None:
        if quantity > product.stock:
            raise InsufficientStock(
                f"Only {product.stock} of '{product.name}' in stock"
            )

    # ---- read ----

    def project(self, session: Session, user_id: uuid.UUID) -> CartView:
        """
        Build the client-visible cart.

        Lines whose product has since been removed from the catalog are
        left out of the view. The stored cart is not modified.
        """
        cart = self.cart_repo.get(session, user_id)

        items: list[CartLineRead] = []
        item_count = 0
        total = 0.0

        for line in cart.lines:
            snapshot = self.resolver.resolve(session, uuid.UUID(line["product_id"]))
            if snapshot is None:
                logger.warning(
                    "Skipping stale cart line: user=%s product=%s",
                    user_id,
                    line["product_id"],
                )
                continue

            subtotal = round(snapshot.price * line["quantity"], 2)
            item_count += line["quantity"]
            total += subtotal
            items.append(
                CartLineRead(
                    product=snapshot,
                    quantity=line["quantity"],
                    subtotal=subtotal,
                )
            )

        return CartView(items=items, item_count=item_count, total=round(total, 2))

    # ---- mutations ----

    def add_item(
        self,
        session: Session,
        user_id: uuid.UUID,
        product_id: uuid.UUID,
        quantity: int = 1,
    ) -> CartView:
        """
        Add `quantity` units of a product.

        Rules:
          - product must exist
          - quantity >= 1
          - existing_quantity + quantity <= stock (rejected, never clamped)
        """
        with self.locks.hold(user_id):
            product = self._get_product(session, product_id)
            if quantity <= 0:
                raise InvalidQuantity()

            cart = self.cart_repo.get(session, user_id)
            lines = _line_map(cart)
            key = str(product_id)
            new_qty = lines.get(key, 0) + quantity
            self._check_stock(product, new_qty)

            lines[key] = new_qty
            self.cart_repo.save(session, _with_lines(cart, lines))
            logger.info("Cart add: user=%s product=%s qty=%s", user_id, key, new_qty)

        return self.project(session, user_id)

    def update_item(
        self,
        session: Session,
        user_id: uuid.UUID,
        product_id: uuid.UUID,
        quantity: int,
    ) -> CartView:
        """
        Set the quantity of an existing line (absolute, not a delta).

        quantity <= 0 removes the line. Stock is checked against a fresh
        catalog read, not the value seen when the line was added.
        """
        with self.locks.hold(user_id):
            cart = self.cart_repo.get(session, user_id)
            lines = _line_map(cart)
            key = str(product_id)
            if key not in lines:
                raise LineNotFound()

            if quantity <= 0:
                del lines[key]
            else:
                product = self._get_product(session, product_id)
                self._check_stock(product, quantity)
                lines[key] = quantity

            self.cart_repo.save(session, _with_lines(cart, lines))
            if quantity <= 0:
                logger.info("Cart update: user=%s product=%s qty=%s (removed)", user_id, key, quantity)
            else:
                logger.info("Cart update: user=%s product=%s qty=%s", user_id, key, quantity)

        return self.project(session, user_id)

    def remove_item(
        self,
        session: Session,
        user_id: uuid.UUID,
        product_id: uuid.UUID,
    ) -> CartView:
        """
        Remove a product from the cart. Removing a product that is not in
        the cart is a no-op.
        """
        with self.locks.hold(user_id):
            cart = self.cart_repo.get(session, user_id)
            lines = _line_map(cart)
            key = str(product_id)
            if key in lines:
                del lines[key]
                self.cart_repo.save(session, _with_lines(cart, lines))
                logger.info("Cart remove: user=%s product=%s", user_id, key)

        return self.project(session, user_id)

    def clear_cart(
        self,
        session: Session,
        user_id: uuid.UUID,
    ) -> CartView:
        """
        Remove every line. Always succeeds; an empty cart is left as is.
        """
        with self.locks.hold(user_id):
            cart = self.cart_repo.get(session, user_id)
            if cart.lines:
                self.cart_repo.clear(session, cart)
                logger.info("Cart cleared: user=%s", user_id)

        return CartView(items=[], item_count=0, total=0.0)
