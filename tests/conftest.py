"""
Shared fixtures.

Every test gets its own file-backed SQLite database so that threads
(and the per-request sessions FastAPI opens) see the same data.
"""
import os

# Must be set before storefront modules build the default engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine

from storefront.core.locks import KeyedLocks
from storefront.database import get_session
from storefront.main import app
from storefront.models.product import Product
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.services.cart_service import CartService
from storefront.services.product_resolver import ProductResolver


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False, "timeout": 5},
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def cart_service() -> CartService:
    return CartService(
        CartRepository(),
        ProductResolver(ProductRepository()),
        KeyedLocks(timeout=2.0),
    )


@pytest.fixture
def make_product(session):
    """Factory inserting a catalog product; defaults match the headphones fixture."""

    def _make(name: str = "Wireless Headphones", price: float = 199.99, stock: int = 50) -> Product:
        product = Product(
            name=name,
            price=price,
            stock=stock,
            category="Electronics",
            images=["https://example.com/a.jpg", "https://example.com/b.jpg"],
        )
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def test_client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(test_client: TestClient) -> dict[str, str]:
    """Register a fresh customer and return its Authorization header."""
    response = test_client.post(
        "/api/auth/register",
        json={"name": "Ada", "email": "ada@example.com", "password": "secret123"},
    )
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
