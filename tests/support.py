"""Shared builders for tests: settings, an in-memory app, rows and session cookies."""

from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from kedjora.core.config import Settings
from kedjora.core.security import hash_password
from kedjora.main import create_app
from kedjora.models import Base, Order, Portfolio, Service, User
from kedjora.schemas.auth import AuthenticatedIdentity

TEST_SECRET = "test-session-secret-0123456789abcdef"
OTHER_SECRET = "another-session-secret-fedcba9876543210"
FIXED_NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)
# Low bcrypt cost keeps tests fast.
TEST_BCRYPT_ROUNDS = 4

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Admin123!"


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "SESSION_SECRET": TEST_SECRET,
        "DATABASE_URL": "sqlite://",
        "SESSION_COOKIE_SECURE": False,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def build_app(**overrides: object) -> FastAPI:
    """App backed by a fresh in-memory SQLite database with all tables created."""
    app = create_app(make_settings(**overrides))
    Base.metadata.create_all(app.state.engine)
    return app


def client_for(app: FastAPI) -> TestClient:
    return TestClient(app, follow_redirects=False)


def db_session(app: FastAPI) -> Session:
    return app.state.session_factory()


def add_user(
    app: FastAPI,
    email: str = ADMIN_EMAIL,
    password: str = ADMIN_PASSWORD,
    name: str | None = "Admin",
    role: str = "ADMIN",
) -> int:
    with db_session(app) as db:
        user = User(
            email=email,
            password_hash=hash_password(password, rounds=TEST_BCRYPT_ROUNDS),
            name=name,
            role=role,
        )
        db.add(user)
        db.commit()
        return user.id


def session_cookie(app: FastAPI, user_id: int = 1, role: str = "ADMIN") -> str:
    """Signed session token for the app's codec, as the login endpoint would issue."""
    identity = AuthenticatedIdentity(id=user_id, name="Admin", email=ADMIN_EMAIL, role=role)
    return app.state.session_codec.issue(identity)


def sign_in(client: TestClient, app: FastAPI, user_id: int = 1) -> None:
    client.cookies.set(app.state.session_codec.cookie_name, session_cookie(app, user_id))


def add_service(app: FastAPI, **kwargs: object) -> int:
    values: dict[str, object] = {
        "title": "Web Development",
        "slug": "web-development",
        "description": "Company profiles and web apps.",
        "features": ["Responsive design", "SEO ready"],
        "price": "Rp 5.000.000",
        "is_popular": False,
        "is_active": True,
    }
    values.update(kwargs)
    with db_session(app) as db:
        service = Service(**values)
        db.add(service)
        db.commit()
        return service.id


def add_portfolio(app: FastAPI, **kwargs: object) -> int:
    values: dict[str, object] = {
        "title": "Coffee Shop Website",
        "slug": "coffee-shop-website",
        "description": "Landing page and online menu.",
        "client_name": "Kopi Senja",
        "service_type": "Web Development",
        "image_urls": ["https://cdn.example.com/kopi.png"],
        "technologies": ["Next.js", "Tailwind"],
        "featured": False,
    }
    values.update(kwargs)
    with db_session(app) as db:
        item = Portfolio(**values)
        db.add(item)
        db.commit()
        return item.id


def add_order(app: FastAPI, service_id: int, **kwargs: object) -> int:
    values: dict[str, object] = {
        "name": "Budi",
        "email": "budi@example.com",
        "phone": "08123456789",
        "service_id": service_id,
        "message": "I need a company profile site.",
        "status": "PENDING",
    }
    values.update(kwargs)
    with db_session(app) as db:
        order = Order(**values)
        db.add(order)
        db.commit()
        return order.id


def count_rows(app: FastAPI, model: type) -> int:
    with db_session(app) as db:
        return db.query(model).count()
