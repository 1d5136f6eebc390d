"""Tests for the auth API: login, logout, session lookup and the require_session dependency."""

import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from kedjora.models import User
from tests.support import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    add_user,
    build_app,
    client_for,
    db_session,
    sign_in,
)

LOGIN_URL = "/api/auth/login"
SESSION_URL = "/api/auth/session"
LOGOUT_URL = "/api/auth/logout"


class AuthApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.app = build_app()
        self.client = client_for(self.app)
        self.user_id = add_user(self.app)
        self.cookie_name = self.app.state.session_codec.cookie_name

    def login(self, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD, **extra):
        return self.client.post(LOGIN_URL, json={"email": email, "password": password, **extra})


class TestLogin(AuthApiTestCase):
    def test_success_sets_http_only_cookie(self) -> None:
        response = self.login()
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["ok"])
        self.assertEqual(data["user"]["id"], self.user_id)
        self.assertEqual(data["user"]["email"], ADMIN_EMAIL)
        self.assertEqual(data["user"]["role"], "ADMIN")
        self.assertEqual(data["redirect_to"], "/admin")

        set_cookie = response.headers["set-cookie"]
        self.assertTrue(set_cookie.startswith(f"{self.cookie_name}="))
        self.assertIn("HttpOnly", set_cookie)
        self.assertIn("Path=/", set_cookie)
        self.assertIn("SameSite=lax", set_cookie)
        self.assertIn(f"Max-Age={30 * 24 * 60 * 60}", set_cookie)
        self.assertNotIn("Secure", set_cookie)

    def test_cookie_is_secure_when_configured(self) -> None:
        app = build_app(SESSION_COOKIE_SECURE=True)
        add_user(app)
        response = client_for(app).post(
            LOGIN_URL, json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("Secure", response.headers["set-cookie"])

    def test_token_in_cookie_decodes_to_user(self) -> None:
        response = self.login()
        token = response.cookies[self.cookie_name]
        session = self.app.state.session_codec.decode(token)
        self.assertIsNotNone(session)
        self.assertEqual(session.user_id, self.user_id)
        self.assertEqual(session.role, "ADMIN")

    def test_wrong_password_and_unknown_email_look_the_same(self) -> None:
        wrong_password = self.login(password="not-the-password")
        unknown_email = self.login(email="nobody@example.com")
        for response in (wrong_password, unknown_email):
            self.assertEqual(response.status_code, 401)
            self.assertNotIn("set-cookie", response.headers)
        self.assertEqual(wrong_password.json(), unknown_email.json())
        self.assertEqual(wrong_password.json(), {"detail": "Invalid email or password."})

    def test_missing_fields_are_rejected(self) -> None:
        for body in ({}, {"email": ADMIN_EMAIL}, {"password": ADMIN_PASSWORD}, {"email": "", "password": ""}):
            with self.subTest(body=body):
                response = self.client.post(LOGIN_URL, json=body)
                self.assertEqual(response.status_code, 422)
                self.assertNotIn("set-cookie", response.headers)

    def test_database_failure_is_plain_rejection(self) -> None:
        error = OperationalError("SELECT", {}, Exception("connection refused"))
        with patch("sqlalchemy.orm.Query.first", side_effect=error):
            with self.assertLogs("kedjora.services.credentials", level="ERROR"):
                response = self.login()
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"detail": "Invalid email or password."})

    def test_login_is_read_only(self) -> None:
        self.login()
        self.login(password="wrong")
        with db_session(self.app) as db:
            self.assertEqual(db.query(User).count(), 1)


class TestRedirectTarget(AuthApiTestCase):
    def test_same_origin_targets_are_kept(self) -> None:
        for callback in ("/admin/services", "http://testserver/admin/orders?page=2"):
            with self.subTest(callback=callback):
                response = self.login(callback_url=callback)
                self.assertEqual(response.json()["redirect_to"], callback)

    def test_foreign_targets_fall_back_to_admin(self) -> None:
        for callback in (
            "https://evil.example.com/admin",
            "//evil.example.com/admin",
            "/\\evil.example.com",
            "javascript:alert(1)",
        ):
            with self.subTest(callback=callback):
                response = self.login(callback_url=callback)
                self.assertEqual(response.json()["redirect_to"], "/admin")


class TestSessionEndpoint(AuthApiTestCase):
    def test_anonymous(self) -> None:
        response = self.client.get(SESSION_URL)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"authenticated": False, "user": None, "expires": None})

    def test_after_login(self) -> None:
        self.login()
        data = self.client.get(SESSION_URL).json()
        self.assertTrue(data["authenticated"])
        self.assertEqual(data["user"]["email"], ADMIN_EMAIL)
        self.assertEqual(data["user"]["name"], "Admin")
        self.assertIsNotNone(data["expires"])

    def test_garbage_cookie_is_anonymous(self) -> None:
        self.client.cookies.set(self.cookie_name, "not-a-token")
        data = self.client.get(SESSION_URL).json()
        self.assertFalse(data["authenticated"])


class TestLogout(AuthApiTestCase):
    def test_logout_clears_cookie(self) -> None:
        self.login()
        response = self.client.post(LOGOUT_URL)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ok": True})
        set_cookie = response.headers["set-cookie"]
        self.assertTrue(set_cookie.startswith(f"{self.cookie_name}="))
        self.assertIn("Max-Age=0", set_cookie)
        self.assertFalse(self.client.get(SESSION_URL).json()["authenticated"])

    def test_logout_without_session(self) -> None:
        response = self.client.post(LOGOUT_URL)
        self.assertEqual(response.status_code, 200)


class TestRequireSession(AuthApiTestCase):
    def test_mutation_without_session_is_401(self) -> None:
        response = self.client.delete("/api/services/1")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"detail": "Unauthorized"})

    def test_mutation_with_session_reaches_handler(self) -> None:
        sign_in(self.client, self.app, self.user_id)
        response = self.client.delete("/api/services/1")
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
