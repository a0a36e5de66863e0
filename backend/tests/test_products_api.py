"""
Tests for product CRUD endpoints.
"""

from inventory_api.models import Product


class TestProductCreate:
    """POST /api/products"""

    def test_create_minimal(self, client):
        response = client.post("/api/products", json={"name": "  Château Margaux  "})
        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["name"] == "Château Margaux"
        assert data["brand"] is None
        assert data["organic"] is False
        assert data["vegetarian"] is False
        assert data["vegan"] is False

    def test_create_normalizes_fields(self, client):
        response = client.post(
            "/api/products",
            json={
                "name": "Rioja Reserva",
                "brand": "   ",
                "vintage": " 2018 ",
                "kcal": 85,
                "fat": 0.0,
                "organic": True,
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["brand"] is None
        assert data["vintage"] == "2018"
        assert data["kcal"] == "85"
        assert data["fat"] == "0"
        assert data["organic"] is True
        assert data["vegan"] is False

    def test_empty_name_rejected(self, client):
        response = client.post("/api/products", json={"name": ""})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid product data"
        assert any(d["field"] == "name" for d in body["details"])

    def test_all_errors_reported(self, client):
        response = client.post("/api/products", json={"name": " ", "vegan": "no", "sku": 42})
        assert response.status_code == 400
        fields = {d["field"] for d in response.json()["details"]}
        assert fields == {"name", "vegan", "sku"}

    def test_non_object_body_rejected(self, client):
        response = client.post("/api/products", json=["name"])
        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == ""


class TestProductRead:
    """GET /api/products"""

    def test_list_ordered_by_name(self, client):
        for name in ("Zinfandel", "Albariño", "Merlot"):
            client.post("/api/products", json={"name": name})

        response = client.get("/api/products")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Albariño", "Merlot", "Zinfandel"]

    def test_get_by_id(self, client, seed_product):
        response = client.get(f"/api/products/{seed_product.id}")
        assert response.status_code == 200
        assert response.json()["sku"] == "CT-2019"

    def test_get_missing(self, client):
        response = client.get("/api/products/9999")
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_non_numeric_id(self, client):
        response = client.get("/api/products/abc")
        assert response.status_code == 400


class TestProductUpdate:
    """PUT /api/products/{id}"""

    def test_partial_update_keeps_other_fields(self, client, seed_product):
        response = client.put(f"/api/products/{seed_product.id}", json={"sku": "X"})
        assert response.status_code == 200
        data = response.json()
        assert data["sku"] == "X"
        assert data["name"] == "Château Test"
        assert data["brand"] == "Test Winery"
        assert data["vintage"] == "2019"
        assert data["kcal"] == "120"

    def test_blank_value_clears_field(self, client, seed_product):
        response = client.put(f"/api/products/{seed_product.id}", json={"brand": "  "})
        assert response.status_code == 200
        assert response.json()["brand"] is None

    def test_null_flag_rejected(self, client, seed_product):
        response = client.put(f"/api/products/{seed_product.id}", json={"organic": None})
        assert response.status_code == 400
        assert [d["field"] for d in response.json()["details"]] == ["organic"]

    def test_update_validates_before_lookup(self, client):
        response = client.put("/api/products/9999", json={"name": ""})
        assert response.status_code == 400

    def test_update_missing(self, client):
        response = client.put("/api/products/9999", json={"sku": "X"})
        assert response.status_code == 404

    def test_update_persists(self, client, seed_product, db_session):
        client.put(f"/api/products/{seed_product.id}", json={"vegan": True})
        db_session.expire_all()
        product = db_session.get(Product, seed_product.id)
        assert product.vegan is True
        assert product.brand == "Test Winery"


class TestProductDelete:
    """DELETE /api/products/{id}"""

    def test_delete(self, client, seed_product):
        response = client.delete(f"/api/products/{seed_product.id}")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/products/{seed_product.id}").status_code == 404

    def test_delete_missing(self, client):
        response = client.delete("/api/products/9999")
        assert response.status_code == 404


class TestUpstreamFailures:
    """Database failures surface as 500 with the driver message."""

    def test_list_failure(self, client, monkeypatch):
        from sqlalchemy.exc import OperationalError
        from sqlalchemy.orm import Session

        def broken_execute(self, *args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

        monkeypatch.setattr(Session, "execute", broken_execute)
        response = client.get("/api/products")
        assert response.status_code == 500
        assert response.json() == {"error": "connection refused"}
