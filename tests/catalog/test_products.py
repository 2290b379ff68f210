# tests/catalog/test_products.py

"""
Integration tests for the product endpoints of the catalog service.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from minimal_apis.catalog.models import Product


@pytest.fixture
def product_data(category):
    return {
        "name": "Caderno Espiral",
        "description": "Caderno 200 folhas",
        "price": 12.5,
        "image": "caderno.jpg",
        "purchaseDate": "2024-03-15",
        "stock": 30,
        "categoryId": category["id"],
    }


def test_create_product_success(client: TestClient, db_session_for_test: Session, product_data):
    response = client.post("/produtos", json=product_data)

    assert response.status_code == 201
    response_data = response.json()
    assert response_data["name"] == product_data["name"]
    assert response_data["description"] == product_data["description"]
    assert float(response_data["price"]) == product_data["price"]
    assert response_data["image"] == product_data["image"]
    assert response_data["purchaseDate"] == product_data["purchaseDate"]
    assert response_data["stock"] == product_data["stock"]
    assert response_data["categoryId"] == product_data["categoryId"]
    assert isinstance(response_data["id"], int)
    assert response.headers["location"] == f"/produtos/{response_data['id']}"

    db_product = db_session_for_test.get(Product, response_data["id"])
    assert db_product is not None
    assert db_product.name == product_data["name"]


def test_create_product_accepts_snake_case(client: TestClient, category):
    response = client.post(
        "/produtos",
        json={"name": "Lápis", "price": 1.25, "stock": 5, "category_id": category["id"]},
    )
    assert response.status_code == 201
    assert response.json()["categoryId"] == category["id"]


def test_create_product_assigns_fresh_ids(client: TestClient, product_data):
    first = client.post("/produtos", json=product_data).json()
    second = client.post("/produtos", json=product_data).json()
    assert first["id"] != second["id"]


def test_create_product_unknown_category(client: TestClient, product_data):
    product_data["categoryId"] = 999999
    response = client.post("/produtos", json=product_data)
    assert response.status_code == 400
    assert response.json()["detail"] == "Category does not exist"


def test_create_product_negative_price(client: TestClient, product_data):
    product_data["price"] = -1
    response = client.post("/produtos", json=product_data)
    assert response.status_code == 400


def test_create_product_negative_stock(client: TestClient, product_data):
    product_data["stock"] = -3
    response = client.post("/produtos", json=product_data)
    assert response.status_code == 400


def test_list_products_is_public(client: TestClient, product_data):
    client.post("/produtos", json=product_data)

    response = client.get("/produtos")
    assert response.status_code == 200
    assert isinstance(response.json(), list)
    assert any(p["name"] == "Caderno Espiral" for p in response.json())


def test_list_products_empty(client: TestClient):
    response = client.get("/produtos")
    assert response.status_code == 200
    assert response.json() == []


def test_get_product_success(client: TestClient, product_data):
    created = client.post("/produtos", json=product_data).json()

    response = client.get(f"/produtos/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_get_product_not_found(client: TestClient):
    response = client.get("/produtos/999999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


def test_update_product_full(client: TestClient, product_data):
    created = client.post("/produtos", json=product_data).json()
    other_category = client.post("/categorias", json={"name": "Papelaria"}).json()

    update_data = {
        "id": created["id"],
        "name": "Caderno Brochura",
        "description": "Caderno 96 folhas",
        "price": 7.9,
        "image": "brochura.jpg",
        "purchaseDate": "2024-04-01",
        "stock": 12,
        "categoryId": other_category["id"],
    }
    response = client.put(f"/produtos/{created['id']}", json=update_data)
    assert response.status_code == 200
    assert response.json() == update_data

    assert client.get(f"/produtos/{created['id']}").json() == update_data


def test_update_product_id_mismatch(client: TestClient, product_data):
    created = client.post("/produtos", json=product_data).json()
    response = client.put(
        f"/produtos/{created['id']}",
        json={**product_data, "id": created["id"] + 100},
    )
    assert response.status_code == 400


def test_update_product_not_found(client: TestClient, product_data):
    response = client.put("/produtos/999999", json={**product_data, "id": 999999})
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


def test_update_product_unknown_category(client: TestClient, product_data):
    created = client.post("/produtos", json=product_data).json()
    response = client.put(
        f"/produtos/{created['id']}",
        json={**product_data, "id": created["id"], "categoryId": 999999},
    )
    assert response.status_code == 400


def test_delete_product_success(client: TestClient, product_data):
    created = client.post("/produtos", json=product_data).json()

    response = client.delete(f"/produtos/{created['id']}")
    assert response.status_code == 204

    get_response = client.get(f"/produtos/{created['id']}")
    assert get_response.status_code == 404


def test_delete_product_twice(client: TestClient, product_data):
    created = client.post("/produtos", json=product_data).json()
    assert client.delete(f"/produtos/{created['id']}").status_code == 204
    assert client.delete(f"/produtos/{created['id']}").status_code == 404


def test_delete_product_not_found(client: TestClient):
    response = client.delete("/produtos/999999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


def test_create_product_price_with_three_decimals(client: TestClient, product_data):
    """Prices carry at most 2 decimal places; more is rejected, not rounded."""
    product_data["price"] = 10.005
    response = client.post("/produtos", json=product_data)
    assert response.status_code == 400
    assert any(err["loc"][-1] == "price" for err in response.json()["detail"])


def test_create_product_price_too_many_digits(client: TestClient, product_data):
    """Prices fit in 10 digits (8 before the decimal point)."""
    product_data["price"] = 123456789012.5
    response = client.post("/produtos", json=product_data)
    assert response.status_code == 400


def test_create_product_largest_price(client: TestClient, product_data):
    product_data["price"] = 99999999.99
    response = client.post("/produtos", json=product_data)
    assert response.status_code == 201
    assert float(response.json()["price"]) == 99999999.99


def test_update_product_price_with_three_decimals(client: TestClient, product_data):
    created = client.post("/produtos", json=product_data).json()
    response = client.put(
        f"/produtos/{created['id']}",
        json={**product_data, "id": created["id"], "price": 1.999},
    )
    assert response.status_code == 400
    assert float(client.get(f"/produtos/{created['id']}").json()["price"]) == product_data["price"]


def test_get_product_non_integer_id(client: TestClient):
    response = client.get("/produtos/abc")
    assert response.status_code == 404
