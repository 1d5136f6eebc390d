"""Tests for /api/portfolio."""

import unittest

from kedjora.models import Portfolio
from tests.support import add_portfolio, build_app, client_for, count_rows, sign_in

NEW_ITEM = {
    "title": "Clinic Booking App",
    "slug": "clinic-booking-app",
    "description": "Appointment booking for a dental clinic.",
    "client_name": "Senyum Dental",
    "service_type": "Mobile Apps",
    "image_urls": ["https://cdn.example.com/clinic.png"],
    "technologies": ["Flutter", "Firebase"],
}


class TestPortfolioApi(unittest.TestCase):
    def setUp(self) -> None:
        self.app = build_app()
        self.client = client_for(self.app)

    def test_writes_require_session(self) -> None:
        item_id = add_portfolio(self.app)
        self.assertEqual(self.client.post("/api/portfolio", json=NEW_ITEM).status_code, 401)
        self.assertEqual(self.client.patch(f"/api/portfolio/{item_id}", json=NEW_ITEM).status_code, 401)
        self.assertEqual(self.client.delete(f"/api/portfolio/{item_id}").status_code, 401)
        self.assertEqual(count_rows(self.app, Portfolio), 1)

    def test_featured_filter(self) -> None:
        add_portfolio(self.app)
        featured = add_portfolio(self.app, slug="featured-one", featured=True)
        all_items = self.client.get("/api/portfolio").json()
        only_featured = self.client.get("/api/portfolio", params={"featured": "true"}).json()
        self.assertEqual(len(all_items), 2)
        self.assertEqual([p["id"] for p in only_featured], [featured])

    def test_create_update_delete(self) -> None:
        sign_in(self.client, self.app)
        created = self.client.post("/api/portfolio", json=NEW_ITEM)
        self.assertEqual(created.status_code, 200)
        item = created.json()
        self.assertFalse(item["featured"])
        self.assertIsNone(item["demo_url"])

        required = ("title", "description", "service_type", "image_urls", "technologies")
        body = {key: NEW_ITEM[key] for key in required}
        updated = self.client.patch(f"/api/portfolio/{item['id']}", json={**body, "featured": True})
        self.assertEqual(updated.status_code, 200)
        self.assertTrue(updated.json()["featured"])
        self.assertEqual(updated.json()["client_name"], "Senyum Dental")

        deleted = self.client.delete(f"/api/portfolio/{item['id']}")
        self.assertEqual(deleted.json(), {"success": True})
        self.assertEqual(self.client.get(f"/api/portfolio/{item['id']}").status_code, 404)

    def test_duplicate_slug_is_400(self) -> None:
        sign_in(self.client, self.app)
        add_portfolio(self.app, slug="clinic-booking-app")
        response = self.client.post("/api/portfolio", json=NEW_ITEM)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"detail": "Slug already exists"})


if __name__ == "__main__":
    unittest.main()
