"""
HTTP tests for a service running with the product profile, plus the
cross‑cutting behaviour of the application (routing errors, internal
errors, CORS).
"""

import pytest
from fastapi.testclient import TestClient

from record_store_api.app.core.config import Settings
from record_store_api.app.main import create_app
from record_store_api.app.services.profiles import PRODUCT_PROFILE
from record_store_api.app.services.record_store import RecordStore


class TestProductCrud:
    def test_create_and_get(self, product_client, phone):
        response = product_client.post("/api/products", json=phone)
        assert response.status_code == 201
        product = response.json()
        assert product["id"] == "p1"
        assert product["name"] == "Smartphone X"
        assert product_client.get("/api/products/p1").json() == product

    def test_create_missing_stock_leaves_store_unchanged(self, product_client, phone):
        product_client.post("/api/products", json=phone)
        incomplete = dict(phone)
        del incomplete["stock"]
        response = product_client.post("/api/products", json=incomplete)
        assert response.status_code == 400
        assert response.json() == {"error": "all fields are required"}
        assert len(product_client.get("/api/products").json()) == 1

    def test_create_with_zero_stock(self, product_client, phone):
        phone["stock"] = 0
        response = product_client.post("/api/products", json=phone)
        assert response.status_code == 201
        assert response.json()["stock"] == 0

    def test_patch_applies_partial_update(self, product_client, phone):
        product_client.post("/api/products", json=phone)
        response = product_client.patch("/api/products/p1", json={"stock": 0, "name": ""})
        assert response.status_code == 200
        body = response.json()
        assert body["stock"] == 0
        assert body["name"] == "Smartphone X"
        assert body["price"] == 89990

    def test_patch_without_fields(self, product_client, phone):
        product_client.post("/api/products", json=phone)
        response = product_client.patch("/api/products/p1", json={"colour": "red"})
        assert response.status_code == 400
        assert response.json() == {"error": "nothing to update"}

    def test_delete_twice(self, product_client, phone):
        product_client.post("/api/products", json=phone)
        assert product_client.delete("/api/products/p1").status_code == 204
        response = product_client.delete("/api/products/p1")
        assert response.status_code == 404
        assert response.json() == {"error": "product not found"}
        assert product_client.get("/api/products").json() == []


class TestProductSearch:
    @pytest.fixture(autouse=True)
    def catalogue(self, product_client, phone):
        product_client.post("/api/products", json=phone)
        product_client.post("/api/products", json={
            "name": "Headphones", "category": "Accessories",
            "description": "Wireless, works with any phone", "price": 29990, "stock": 7,
        })
        product_client.post("/api/products", json={
            "name": "Coffee maker", "category": "Home", "description": "1.25l", "price": 6990, "stock": 3,
        })

    def test_matches_name_category_or_description(self, product_client):
        response = product_client.get("/api/products/search/PHONE")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Smartphone X", "Headphones"]

    def test_matches_category(self, product_client):
        assert [p["name"] for p in product_client.get("/api/products/search/home").json()] == ["Coffee maker"]

    def test_no_match_is_an_empty_list(self, product_client):
        response = product_client.get("/api/products/search/tablet")
        assert response.status_code == 200
        assert response.json() == []

    def test_query_is_url_decoded(self, product_client):
        response = product_client.get("/api/products/search/coffee%20maker")
        assert [p["name"] for p in response.json()] == ["Coffee maker"]


class TestProductStats:
    def test_stats(self, product_client):
        product_client.post("/api/products", json={
            "name": "a", "category": "Books", "description": "d", "price": 100, "stock": 3,
        })
        product_client.post("/api/products", json={
            "name": "b", "category": "Home", "description": "d", "price": 50, "stock": 1,
        })
        assert product_client.get("/api/stats").json() == {
            "totalProducts": 2,
            "totalStock": 4,
            "totalValue": 350,
            "categories": ["Books", "Home"],
            "avgPrice": 88,
        }

    def test_stats_on_empty_store(self, product_client):
        response = product_client.get("/api/stats")
        assert response.status_code == 200
        assert response.json() == {
            "totalProducts": 0,
            "totalStock": 0,
            "totalValue": 0,
            "categories": [],
            "avgPrice": None,
        }


class TestApplicationErrors:
    def test_unknown_route(self, product_client):
        response = product_client.get("/api/orders")
        assert response.status_code == 404
        assert response.json() == {"error": "route not found"}

    def test_unsupported_method_is_a_missing_route(self, product_client):
        response = product_client.put("/api/products/p1", json={"name": "x"})
        assert response.status_code == 404
        assert response.json() == {"error": "route not found"}

    def test_unexpected_failure_hides_details(self, monkeypatch):
        store = RecordStore(PRODUCT_PROFILE)

        def broken():
            raise RuntimeError("secret detail")

        monkeypatch.setattr(store, "stats", broken)
        app = create_app(Settings(record_type="products"), store=store)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/stats")
        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}

    def test_cors_preflight(self, product_client):
        response = product_client.options(
            "/api/products",
            headers={
                "Origin": "http://localhost:3001",
                "Access-Control-Request-Method": "PATCH",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3001"

    def test_info_lists_search_route(self, product_client):
        info = product_client.get("/").json()
        assert info["collection"] == "products"
        assert info["count"] == 0
        assert {"method": "GET", "path": "/api/products/search/{query}", "summary": "search"} in info["routes"]

    def test_docs_are_served_at_api_docs(self, product_client):
        assert product_client.get("/api-docs").status_code == 200
        assert product_client.get("/docs").status_code == 404

    def test_trailing_slash_is_served_without_redirect(self, product_client, phone):
        product = product_client.post("/api/products/", json=phone).json()
        response = product_client.get("/api/products/", follow_redirects=False)
        assert response.status_code == 200
        assert response.json() == [product]
        response = product_client.get(f"/api/products/{product['id']}/", follow_redirects=False)
        assert response.status_code == 200
        assert response.json() == product
