# storefront/services/product_resolver.py
import uuid

from sqlmodel import Session

from storefront.database import storage_guard
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductSnapshot


class ProductResolver:
    """
    Looks up products referenced by carts.

    Every call reads the catalog again; snapshots are never reused
    across mutations because stock can change in between.
    """

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    def resolve(self, session: Session, product_id: uuid.UUID) -> ProductSnapshot | None:
        """
        Return the product's current price/stock snapshot, or None if the
        id is not in the catalog.
        """
        with storage_guard(session, "catalog read"):
            product = self.product_repo.get_current(session, product_id)
        if product is None:
            return None
        return ProductSnapshot(
            id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            category=product.category,
            image=product.images[0] if product.images else None,
        )
