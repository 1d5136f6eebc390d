"""Unit tests for kedjora.core.config and startup failure on a missing signing secret."""

import os
import unittest
from unittest.mock import MagicMock, patch

from pydantic import SecretStr, ValidationError

from kedjora.core.config import Settings, get_settings
from kedjora.core.sessions import MisconfiguredSigningSecret
from kedjora.main import build_session_codec, create_app
from tests.support import TEST_SECRET, make_settings


class TestSessionSecret(unittest.TestCase):
    def test_missing_secret_is_fatal(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_blank_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(SESSION_SECRET="   ")

    def test_short_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(SESSION_SECRET="too-short")

    def test_secret_read_from_environment(self) -> None:
        with patch.dict(os.environ, {"SESSION_SECRET": TEST_SECRET}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.SESSION_SECRET.get_secret_value(), TEST_SECRET)
        self.assertEqual(settings.SESSION_MAX_AGE_DAYS, 30)
        self.assertTrue(settings.SESSION_COOKIE_SECURE)

    def test_create_app_fails_without_secret(self) -> None:
        get_settings.cache_clear()
        try:
            with patch.dict(os.environ, {}, clear=True):
                with self.assertRaises(ValidationError):
                    create_app()
        finally:
            get_settings.cache_clear()

    def test_codec_refuses_empty_secret(self) -> None:
        settings = MagicMock()
        settings.SESSION_SECRET = SecretStr("")
        settings.SESSION_ALGORITHM = "HS256"
        settings.SESSION_MAX_AGE_DAYS = 30
        settings.SESSION_COOKIE_NAME = "kedjora.session-token"
        with self.assertRaises(MisconfiguredSigningSecret):
            build_session_codec(settings)


class TestOtherSettings(unittest.TestCase):
    def test_database_url_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://root@localhost/kedjora")
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="   ")
        self.assertEqual(
            make_settings(DATABASE_URL=" postgresql://u:p@db/kedjora ").DATABASE_URL,
            "postgresql://u:p@db/kedjora",
        )

    def test_session_max_age_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(SESSION_MAX_AGE_DAYS=0)
        with self.assertRaises(ValidationError):
            make_settings(SESSION_MAX_AGE_DAYS=366)

    def test_only_hmac_algorithms(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(SESSION_ALGORITHM="none")


if __name__ == "__main__":
    unittest.main()
