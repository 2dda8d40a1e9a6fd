# storefront/repositories/product_repo.py
import uuid

from sqlmodel import Session, delete, select

from storefront.database import storage_guard
from storefront.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    - Store failures surface as UpstreamUnavailable.
    """

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        with storage_guard(session, "product read"):
            return session.get(Product, product_id)

    def list_products(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Product]:
        stmt = select(Product).order_by(Product.created_at).offset(skip).limit(limit)
        with storage_guard(session, "product listing"):
            return session.exec(stmt).all()

    def replace_all(self, session: Session, products: list[Product]) -> list[Product]:
        """Delete every product and insert `products` in one transaction."""
        with storage_guard(session, "catalog seed"):
            session.exec(delete(Product))
            session.add_all(products)
            session.commit()
            for product in products:
                session.refresh(product)
        return products

    def get_current(self, session: Session, product_id: uuid.UUID) -> Product | None:
        """
        Like `get_by_id`, but always re-reads the row instead of trusting
        an instance already loaded into the session.

        Callers wrap this in `storage_guard` (see ProductResolver).
        """
        return session.get(Product, product_id, populate_existing=True)
