# storefront/services/product_service.py
import logging
import uuid

from sqlmodel import Session

from storefront.core.errors import ProductNotFound
from storefront.models.product import Product
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for the catalog.

    Responsibilities:
      - simple listing and lookup
      - replacing the catalog with fixture data (seed)
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Product]:
        return self.repo.list_products(session, skip=skip, limit=limit)

    def get_product(self, session: Session, product_id: uuid.UUID) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise ProductNotFound()
        return product

    def seed_catalog(self, session: Session, products: list[ProductCreate]) -> list[Product]:
        """
        Replace the whole catalog with `products`.

        Existing carts keep their lines; lines pointing at removed
        products simply stop showing up in the cart view.
        """
        created = self.repo.replace_all(
            session,
            [Product.model_validate(p.model_dump()) for p in products],
        )
        logger.info("Seeded catalog with %d products", len(created))
        return created
