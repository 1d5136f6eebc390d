"""End-to-end: seeded admin logs in, uses the admin area, and anonymous deletes are refused."""

import unittest

from kedjora.models import Service
from kedjora.services.credentials import verify_credentials
from tests.support import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    add_service,
    add_user,
    build_app,
    client_for,
    count_rows,
    db_session,
)


class TestAdminLoginScenario(unittest.TestCase):
    def setUp(self) -> None:
        self.app = build_app()
        add_user(self.app)
        self.service_id = add_service(self.app)

    def test_seeded_credentials_verify(self) -> None:
        with db_session(self.app) as db:
            identity = verify_credentials(db, ADMIN_EMAIL, ADMIN_PASSWORD)
        self.assertEqual(identity.email, ADMIN_EMAIL)
        self.assertEqual(identity.role, "ADMIN")

    def test_login_then_admin_then_anonymous_delete(self) -> None:
        admin = client_for(self.app)
        login = admin.post(
            "/api/auth/login",
            json={
                "email": ADMIN_EMAIL,
                "password": ADMIN_PASSWORD,
                "callback_url": "http://testserver/admin/services",
            },
        )
        self.assertEqual(login.status_code, 200)
        self.assertEqual(login.json()["redirect_to"], "http://testserver/admin/services")

        dashboard = admin.get("/admin")
        self.assertEqual(dashboard.status_code, 200)
        self.assertIn("Dashboard", dashboard.text)
        self.assertEqual(admin.get("/admin/services").status_code, 200)

        anonymous = client_for(self.app)
        api_delete = anonymous.delete(f"/api/services/{self.service_id}")
        self.assertEqual(api_delete.status_code, 401)
        page_delete = anonymous.delete("/admin/services")
        self.assertEqual(page_delete.status_code, 307)
        self.assertTrue(page_delete.headers["location"].startswith("/auth/login?callbackUrl="))

        self.assertEqual(count_rows(self.app, Service), 1)
        service = anonymous.get(f"/api/services/{self.service_id}").json()
        self.assertEqual(service["title"], "Web Development")
        self.assertTrue(service["is_active"])


if __name__ == "__main__":
    unittest.main()
