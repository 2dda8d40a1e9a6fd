# seed_db.py
# Create tables and load the sample catalog without starting the API.
import logging

from sqlmodel import Session

from storefront.database import create_db_and_tables, engine
from storefront.models import cart as _cart_models  # noqa: F401
from storefront.models import user as _user_models  # noqa: F401
from storefront.repositories.product_repo import ProductRepository
from storefront.seed_data import SAMPLE_PRODUCTS
from storefront.services.product_service import ProductService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    logger.info("Creating database and tables...")
    create_db_and_tables()

    with Session(engine) as session:
        products = ProductService(ProductRepository()).seed_catalog(session, SAMPLE_PRODUCTS)

    logger.info("Done: %d products in catalog.", len(products))


if __name__ == "__main__":
    main()
