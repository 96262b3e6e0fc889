"""Integration tests for Order API endpoints via TestClient."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest
from app import app
from fastapi.testclient import TestClient
from inventory.stock import get_inventory
from ordering.coupons import get_discounts
from ordering.domain import get_order_service
from payments.gateway import get_gateway


@pytest.fixture()
def client():
    get_inventory().set_stock("Laptop", 50)
    return TestClient(app)


def _create_order(client, **overrides):
    """Helper: POST /orders and return the response."""
    payload = {"product_name": "Laptop", "quantity": 1, "unit_price": 100}
    payload.update(overrides)
    return client.post("/orders", json=payload)


class TestCreateOrderEndpoint:
    def test_create_order(self, client):
        response = _create_order(client)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["state"] == "Paid"
        assert body["priority"] == "Normal"
        assert Decimal(body["total_price"]) == 120
        assert Decimal(body["tax_amount"]) == 20

    def test_sequential_ids(self, client):
        ids = [_create_order(client).json()["id"] for _ in range(3)]
        assert ids == [1, 2, 3]

    def test_validation_error(self, client):
        response = _create_order(client, product_name="TV")

        assert response.status_code == 422
        assert "too short" in response.json()["errors"]["product_name"][0]

    def test_invalid_priority(self, client):
        response = _create_order(client, priority="Critical")

        assert response.status_code == 422
        assert "Invalid priority" in response.json()["errors"]["priority"][0]

    def test_discount_too_large(self, client):
        get_discounts().register("BIGSALE", 35)

        response = _create_order(client, discount_code="BIGSALE")

        assert response.status_code == 409
        assert response.json() == {"error": "Discount too large."}

    def test_out_of_stock(self, client):
        response = _create_order(client, product_name="Tablet")

        assert response.status_code == 409
        assert response.json()["error"] == "Out of stock."

    def test_payment_failed_releases_reservation(self, client):
        get_gateway().configure(should_succeed=False)

        response = _create_order(client, priority="High", quantity=5)

        assert response.status_code == 409
        assert response.json()["error"] == "Payment failed."
        assert get_inventory().available("Laptop") == 50

    def test_pending_approval(self, client):
        get_gateway().configure(manual_approval_threshold=100)

        response = _create_order(client)

        assert response.json()["state"] == "PendingApproval"


class TestGetOrderEndpoint:
    def test_get_order(self, client):
        order_id = _create_order(client).json()["id"]

        response = client.get(f"/orders/{order_id}")

        assert response.status_code == 200
        assert response.json()["product_name"] == "Laptop"

    def test_unknown_order(self, client):
        response = client.get("/orders/999")
        assert response.status_code == 404


class TestUpdateOrderEndpoint:
    def test_update_quantity(self, client):
        order_id = _create_order(client).json()["id"]

        response = client.put(f"/orders/{order_id}/quantity", json={"new_quantity": 3})

        assert response.json() == {"updated": True}
        assert Decimal(client.get(f"/orders/{order_id}").json()["total_price"]) == 360

    def test_stale_order_is_not_updated(self, client):
        order_id = _create_order(client).json()["id"]
        get_order_service().get_order(order_id).created_at = datetime.now(UTC) - timedelta(days=31)

        response = client.put(f"/orders/{order_id}/quantity", json={"new_quantity": 3})

        assert response.status_code == 200
        assert response.json() == {"updated": False}

    def test_invalid_quantity(self, client):
        order_id = _create_order(client).json()["id"]

        response = client.put(f"/orders/{order_id}/quantity", json={"new_quantity": 0})

        assert response.status_code == 422


class TestCancelOrderEndpoint:
    def test_cancel_and_audit_log(self, client):
        order_id = _create_order(client).json()["id"]

        response = client.put(f"/orders/{order_id}/cancel")

        assert response.json() == {"cancelled": True}
        audit = client.get("/orders/audit-log").json()
        assert [entry["id"] for entry in audit] == [order_id]
        assert audit[0]["state"] == "Cancelled"

    def test_shipped_order_is_not_cancelled(self, client):
        order_id = _create_order(client).json()["id"]
        get_order_service().get_order(order_id).ship()

        response = client.put(f"/orders/{order_id}/cancel")

        assert response.json() == {"cancelled": False}
        assert client.get("/orders/audit-log").json() == []


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
