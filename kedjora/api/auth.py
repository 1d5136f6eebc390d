"""Credential login, logout, session lookup and session dependencies (require_session)."""

import logging
from typing import Annotated
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from kedjora.core.config import Settings
from kedjora.core.database import get_db
from kedjora.core.sessions import SessionCodec, SessionToken
from kedjora.schemas.auth import (
    LoginRequest,
    LoginResponse,
    SessionResponse,
    SessionUser,
)
from kedjora.services.credentials import verify_credentials

logger = logging.getLogger(__name__)

router = APIRouter()

ADMIN_ROOT = "/admin"
INVALID_CREDENTIALS_DETAIL = "Invalid email or password."


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_codec(request: Request) -> SessionCodec:
    return request.app.state.session_codec


def get_optional_session(
    request: Request,
    codec: Annotated[SessionCodec, Depends(get_session_codec)],
) -> SessionToken | None:
    """Dependency: the request's valid session, or None. Never raises for bad cookies."""
    return codec.read(request.cookies)


def require_session(
    session: Annotated[SessionToken | None, Depends(get_optional_session)],
) -> SessionToken:
    """Dependency for every mutating content endpoint. Raises 401 before any write happens."""
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return session


def safe_redirect_target(callback_url: str | None, request: Request) -> str:
    """Return callback_url when it points at this site, else the admin root."""
    if not callback_url:
        return ADMIN_ROOT
    if callback_url.startswith("/"):
        # "//host" and "/\host" are protocol-relative in browsers.
        if callback_url.startswith(("//", "/\\")):
            return ADMIN_ROOT
        return callback_url
    parsed = urlsplit(callback_url)
    base = request.base_url
    if parsed.scheme == base.scheme and parsed.netloc == base.netloc:
        return callback_url
    return ADMIN_ROOT


def _session_user(session: SessionToken) -> SessionUser:
    return SessionUser(
        id=session.user_id,
        name=session.name,
        email=session.email,
        role=session.role,
    )


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    request: Request,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[SessionCodec, Depends(get_session_codec)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """
    Authenticate with email and password. On success the signed session is set
    as an HttpOnly cookie; the body tells the login page where to go next.
    Every failure returns the same 401 so callers cannot tell which part was wrong.
    """
    identity = verify_credentials(db, body.email, body.password)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_DETAIL,
        )

    token = codec.issue(identity)
    response.set_cookie(
        key=codec.cookie_name,
        value=token,
        max_age=int(codec.max_age.total_seconds()),
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    logger.info("Login succeeded", extra={"user_id": identity.id})
    return LoginResponse(
        user=SessionUser(
            id=identity.id,
            name=identity.name,
            email=identity.email,
            role=identity.role,
        ),
        redirect_to=safe_redirect_target(body.callback_url, request),
    )


@router.post("/logout")
def logout(
    response: Response,
    codec: Annotated[SessionCodec, Depends(get_session_codec)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> dict[str, bool]:
    """Clear the session cookie. The token itself stays valid until it expires."""
    response.delete_cookie(
        key=codec.cookie_name,
        path="/",
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return {"ok": True}


@router.get("/session", response_model=SessionResponse)
def get_session(
    session: Annotated[SessionToken | None, Depends(get_optional_session)],
) -> SessionResponse:
    """Current session, as the admin shell and login page see it."""
    if session is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(
        authenticated=True,
        user=_session_user(session),
        expires=session.expires_at,
    )
