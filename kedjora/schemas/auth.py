"""Request/response schemas for auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kedjora.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN, description="Email")
    password: str = Field(
        ..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN, description="Password"
    )
    callback_url: str | None = Field(
        default=None,
        max_length=2048,
        description="URL to return to after login (same origin only)",
    )


class AuthenticatedIdentity(BaseModel):
    """Minimal identity returned by credential verification and embedded in the session."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    role: str


class SessionUser(BaseModel):
    """User fields exposed to clients from the session token."""

    id: int
    name: str
    email: str
    role: str


class LoginResponse(BaseModel):
    """Successful login; the session itself travels in the cookie."""

    ok: bool = True
    user: SessionUser
    redirect_to: str = Field(..., description="Where the login page should navigate next")


class SessionResponse(BaseModel):
    """Current session state for the admin shell and other clients."""

    authenticated: bool
    user: SessionUser | None = None
    expires: datetime | None = None
