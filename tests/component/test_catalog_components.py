"""
Component tests for product listing and the seed endpoint.
"""
import uuid

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session


class TestSeed:
    def test_seed_loads_sample_catalog(self, test_client: TestClient):
        response = test_client.post("/api/seed")

        assert response.status_code == 200
        assert response.json() == {"message": "Database seeded successfully!"}

        products = test_client.get("/api/products").json()
        assert len(products) == 6
        headphones = next(p for p in products if p["name"] == "Wireless Headphones")
        assert headphones["price"] == 199.99
        assert headphones["stock"] == 50
        assert len(headphones["images"]) == 3

    def test_reseeding_replaces_catalog(self, test_client: TestClient):
        test_client.post("/api/seed")
        test_client.post("/api/seed")

        assert len(test_client.get("/api/products").json()) == 6

    def test_reseed_drops_stale_lines_from_cart(self, test_client: TestClient, auth_headers):
        """
        Lines pointing at products removed by a re-seed disappear from
        the cart view instead of failing the request.
        """
        test_client.post("/api/seed")
        product = test_client.get("/api/products").json()[0]
        test_client.post(
            "/api/cart",
            json={"product_id": product["id"], "quantity": 1},
            headers=auth_headers,
        )

        test_client.post("/api/seed")
        response = test_client.get("/api/cart", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["items"] == []


class TestProducts:
    def test_get_product_by_id(self, test_client: TestClient, make_product):
        product = make_product()

        response = test_client.get(f"/api/products/{product.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "Wireless Headphones"

    def test_unknown_product_is_404(self, test_client: TestClient):
        response = test_client.get(f"/api/products/{uuid.uuid4()}")

        assert response.status_code == 404

    def test_pagination(self, test_client: TestClient):
        test_client.post("/api/seed")

        response = test_client.get("/api/products", params={"skip": 4, "limit": 10})

        assert len(response.json()) == 2


def test_health(test_client: TestClient):
    assert test_client.get("/").json()["status"] == "ok"


class TestCatalogOutage:
    def test_listing_outage_is_503(self, test_client: TestClient, monkeypatch):
        def _boom(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is down"))

        monkeypatch.setattr(Session, "exec", _boom)

        response = test_client.get("/api/products")

        assert response.status_code == 503
        assert response.json()["detail"] == "Storage temporarily unavailable"
