"""Tests for the product catalog HTTP API."""

import pytest
from fastapi.testclient import TestClient

from src.api import create_app
from src.config import AppConfig, DatabaseConfig, GeneratorConfig, LoggingConfig, ServerConfig
from src.services import ProductGenerator

PRODUCT_KEYS = {"id", "name", "description", "category", "brand", "price", "stock_quantity", "sku"}


@pytest.fixture
def app_config(temp_db_path):
    return AppConfig(
        environment="test",
        database=DatabaseConfig(path=temp_db_path),
        generator=GeneratorConfig(default_count=25, max_batch_size=500),
        server=ServerConfig(host="127.0.0.1", port=3001, cors_origins=["*"]),
        logging=LoggingConfig(level="WARNING"),
    )


@pytest.fixture
def app(app_config, store):
    return create_app(app_config, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


class TestGenerateEndpoint:
    """Test POST /products/generate."""

    def test_generate_with_count(self, client):
        response = client.post("/products/generate", json={"count": 10})

        assert response.status_code == 200
        assert "Added 10 products successfully" in response.json()["message"]
        assert len(client.get("/products").json()) == 10

    def test_generate_without_body_uses_default(self, client):
        response = client.post("/products/generate")

        assert response.status_code == 200
        assert "Added 25 products successfully" in response.json()["message"]

    def test_generate_with_empty_body_uses_default(self, client):
        response = client.post("/products/generate", json={})

        assert response.status_code == 200
        assert "Added 25 products successfully" in response.json()["message"]

    def test_generate_zero(self, client):
        response = client.post("/products/generate", json={"count": 0})

        assert response.status_code == 200
        assert response.json()["message"] == "Added 0 products successfully"

    def test_negative_count_rejected(self, client):
        response = client.post("/products/generate", json={"count": -3})

        assert response.status_code == 422

    @pytest.mark.parametrize("count", [True, "10", 2.5])
    def test_non_integer_count_rejected(self, client, count):
        response = client.post("/products/generate", json={"count": count})

        assert response.status_code == 422
        assert client.get("/products/count").json() == {"count": 0}

    def test_count_above_maximum_rejected(self, client):
        response = client.post("/products/generate", json={"count": 501})

        assert response.status_code == 400
        assert "error" in response.json()
        assert client.get("/products/count").json() == {"count": 0}

    def test_duplicate_skus_reported(self, app, client, store, make_product):
        products = iter([make_product(sku="DUP"), make_product(sku="DUP"), make_product()])
        app.state.generator = ProductGenerator(store, product_factory=lambda: next(products))

        response = client.post("/products/generate", json={"count": 3})

        assert response.status_code == 200
        assert response.json()["message"] == (
            "Added 2 products successfully, skipped 1 duplicate SKUs"
        )

    def test_aborted_batch_returns_generic_error(self, app, client, store, make_product):
        products = iter([make_product(), make_product(stock_quantity=-1)])
        app.state.generator = ProductGenerator(store, product_factory=lambda: next(products))

        response = client.post("/products/generate", json={"count": 2})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate products"}
        assert store.count_all() == 0


class TestListingEndpoints:
    """Test GET /products and GET /products/search."""

    def test_products_have_all_fields(self, client):
        client.post("/products/generate", json={"count": 5})

        products = client.get("/products").json()

        assert len(products) == 5
        for product in products:
            assert set(product) == PRODUCT_KEYS

    def test_products_sorted_by_name(self, client):
        client.post("/products/generate", json={"count": 30})

        names = [p["name"] for p in client.get("/products").json()]

        assert names == sorted(names)

    def test_search_without_query_returns_everything(self, client):
        client.post("/products/generate", json={"count": 10})

        assert client.get("/products/search").json() == client.get("/products").json()
        assert client.get("/products/search?q=").json() == client.get("/products").json()

    def test_search_no_match(self, client):
        client.post("/products/generate", json={"count": 10})

        response = client.get("/products/search", params={"q": "nonexistentproduct123"})

        assert response.status_code == 200
        assert response.json() == []

    def test_search_ranking(self, client, store, make_product):
        store.insert(make_product(name="Aardvark Bag", description="A bag for your phone"))
        store.insert(make_product(name="Zed Phone"))
        store.insert(make_product(name="Mid Case", brand="PhoneCo"))

        response = client.get("/products/search", params={"q": "PHONE"})

        assert [p["name"] for p in response.json()] == ["Zed Phone", "Mid Case", "Aardvark Bag"]

    def test_search_by_brand_matches_only_relevant(self, client):
        client.post("/products/generate", json={"count": 40})
        brand = client.get("/products").json()[0]["brand"]

        results = client.get("/products/search", params={"q": brand}).json()

        assert results
        for product in results:
            text = " ".join(
                str(product[k]) for k in ("name", "description", "category", "brand", "sku")
            ).lower()
            assert brand.lower() in text

    def test_count(self, client):
        client.post("/products/generate", json={"count": 4})

        assert client.get("/products/count").json() == {"count": 4}


class TestDeleteEndpoints:
    """Test DELETE /products and DELETE /products/{id}."""

    def test_delete_all(self, client):
        client.post("/products/generate", json={"count": 5})

        response = client.delete("/products")

        assert response.status_code == 200
        assert response.json() == {"message": "Deleted 5 products"}
        assert client.get("/products").json() == []

    def test_delete_one(self, client, store, make_product):
        product_id = store.insert(make_product())

        first = client.delete(f"/products/{product_id}")
        second = client.delete(f"/products/{product_id}")

        assert first.status_code == 200
        assert second.status_code == 404
        assert second.json() == {"error": f"Product {product_id} not found"}


class TestFailuresAndHealth:
    """Test error surfacing and the health endpoint."""

    def test_store_failure_is_generic(self, client, store):
        store.close()

        for path, message in [
            ("/products", "Failed to fetch products"),
            ("/products/search?q=abc", "Failed to search products"),
            ("/products/count", "Failed to count products"),
        ]:
            response = client.get(path)
            assert response.status_code == 500
            assert response.json() == {"error": message}
            assert "sqlite" not in response.text.lower()

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert body["uptime"] >= 0
        assert "timestamp" in body
