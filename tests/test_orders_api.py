"""Tests for orders: contact-form intake and admin status changes."""

import unittest

from kedjora.models import Order
from tests.support import add_order, add_service, build_app, client_for, count_rows, sign_in

CONTACT = {
    "name": "Sari",
    "email": "sari@example.com",
    "phone": "0811111111",
    "message": "Please quote a landing page.",
}


class OrdersApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.app = build_app()
        self.client = client_for(self.app)
        self.service_id = add_service(self.app)


class TestContactIntake(OrdersApiTestCase):
    def test_submission_creates_pending_order(self) -> None:
        response = self.client.post("/api/contact", json={**CONTACT, "service_id": self.service_id})
        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertEqual(data["status"], "PENDING")
        self.assertEqual(data["service"], {"id": self.service_id, "title": "Web Development"})
        self.assertEqual(count_rows(self.app, Order), 1)

    def test_unknown_service_is_404(self) -> None:
        response = self.client.post("/api/contact", json={**CONTACT, "service_id": 999})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(count_rows(self.app, Order), 0)

    def test_invalid_email_is_422(self) -> None:
        response = self.client.post(
            "/api/contact", json={**CONTACT, "email": "not-an-email", "service_id": self.service_id}
        )
        self.assertEqual(response.status_code, 422)

    def test_orders_collection_has_no_public_create(self) -> None:
        response = self.client.post("/api/orders", json={**CONTACT, "service_id": self.service_id})
        self.assertEqual(response.status_code, 405)
        self.assertEqual(count_rows(self.app, Order), 0)


class TestOrderAdministration(OrdersApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.older = add_order(self.app, self.service_id)
        self.newer = add_order(self.app, self.service_id, name="Sari", email="sari@example.com")

    def test_list_newest_first(self) -> None:
        response = self.client.get("/api/orders")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([o["id"] for o in response.json()], [self.newer, self.older])

    def test_status_change_requires_session(self) -> None:
        response = self.client.patch(f"/api/orders/{self.older}", json={"status": "COMPLETED"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(self.client.get(f"/api/orders/{self.older}").json()["status"], "PENDING")

    def test_status_change(self) -> None:
        sign_in(self.client, self.app)
        with self.assertLogs("kedjora.api.orders", level="INFO"):
            response = self.client.patch(f"/api/orders/{self.older}", json={"status": "IN_PROGRESS"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "IN_PROGRESS")

    def test_unknown_status_is_422(self) -> None:
        sign_in(self.client, self.app)
        response = self.client.patch(f"/api/orders/{self.older}", json={"status": "ARCHIVED"})
        self.assertEqual(response.status_code, 422)

    def test_delete(self) -> None:
        self.assertEqual(self.client.delete(f"/api/orders/{self.older}").status_code, 401)
        sign_in(self.client, self.app)
        response = self.client.delete(f"/api/orders/{self.older}")
        self.assertEqual(response.json(), {"success": True})
        self.assertEqual(count_rows(self.app, Order), 1)
        self.assertEqual(self.client.get(f"/api/orders/{self.older}").status_code, 404)


if __name__ == "__main__":
    unittest.main()
