# storefront/routers/products.py
import uuid

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductRead
from storefront.seed_data import SAMPLE_PRODUCTS
from storefront.services.product_service import ProductService

router = APIRouter(tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("/products", response_model=list[ProductRead])
def list_products(
    session: Session = Depends(get_session),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
):
    """
    List products.

    - Public endpoint.
    """
    return service.list_products(session, skip=skip, limit=limit)


@router.get("/products/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.

    - Public endpoint.
    """
    return service.get_product(session, product_id)


@router.post("/seed")
def seed(session: Session = Depends(get_session)):
    """
    Replace the catalog with the sample products (initial setup).
    """
    service.seed_catalog(session, SAMPLE_PRODUCTS)
    return {"message": "Database seeded successfully!"}
