"""Route guard: decides pass-through or redirect for every incoming request.

This is the authoritative gate for the admin area. Path classification and
the redirect decision are pure functions; the middleware only reads the
session cookie and applies the decision.
"""

import enum
import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from kedjora.core.sessions import SessionCodec

logger = logging.getLogger(__name__)

ADMIN_ROOT = "/admin"
AUTH_ROOT = "/auth"
LOGIN_PATH = "/auth/login"
LEGACY_LOGIN_PATH = "/login"
CALLBACK_PARAM = "callbackUrl"


class PathClass(str, enum.Enum):
    ADMIN = "admin"
    AUTH = "auth"
    LEGACY_LOGIN = "legacy_login"
    OTHER = "other"


class GuardAction(str, enum.Enum):
    PASS = "pass"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_ADMIN = "redirect_admin"
    REDIRECT_CANONICAL_LOGIN = "redirect_canonical_login"


@dataclass(frozen=True)
class GuardDecision:
    action: GuardAction
    location: str | None = None


def _under(path: str, root: str) -> bool:
    return path == root or path.startswith(root + "/")


def classify_path(path: str) -> PathClass:
    if path.rstrip("/") == LEGACY_LOGIN_PATH:
        return PathClass.LEGACY_LOGIN
    if _under(path, ADMIN_ROOT):
        return PathClass.ADMIN
    if _under(path, AUTH_ROOT):
        return PathClass.AUTH
    return PathClass.OTHER


def login_redirect_location(original_url: str) -> str:
    """Login URL carrying the originally requested URL as callbackUrl."""
    return f"{LOGIN_PATH}?{urlencode({CALLBACK_PARAM: original_url})}"


def needs_session(path_class: PathClass) -> bool:
    return path_class in (PathClass.ADMIN, PathClass.AUTH)


def decide(path_class: PathClass, path: str, url: str, has_session: bool) -> GuardDecision:
    """
    LEGACY_LOGIN always goes to the canonical login page. ADMIN without a
    session goes to login with a callback. The login page with a session goes
    to the admin root. Everything else passes.
    """
    if path_class is PathClass.LEGACY_LOGIN:
        return GuardDecision(GuardAction.REDIRECT_CANONICAL_LOGIN, LOGIN_PATH)
    if path_class is PathClass.ADMIN and not has_session:
        return GuardDecision(GuardAction.REDIRECT_LOGIN, login_redirect_location(url))
    if path_class is PathClass.AUTH and has_session and path.rstrip("/") == LOGIN_PATH:
        return GuardDecision(GuardAction.REDIRECT_ADMIN, ADMIN_ROOT)
    return GuardDecision(GuardAction.PASS)


class RouteGuardMiddleware(BaseHTTPMiddleware):
    """Applies `decide` to each request using the app's session codec."""

    def __init__(self, app: ASGIApp, codec: SessionCodec) -> None:
        super().__init__(app)
        self.codec = codec

    def _has_session(self, request: Request) -> bool:
        try:
            return self.codec.read(request.cookies) is not None
        except Exception:
            # Fail closed: an unreadable session is no session.
            logger.exception("Session check failed in route guard; treating as unauthenticated")
            return False

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        path_class = classify_path(path)
        has_session = self._has_session(request) if needs_session(path_class) else False
        decision = decide(path_class, path, str(request.url), has_session)
        if decision.action is GuardAction.PASS:
            return await call_next(request)
        logger.debug(
            "Route guard redirect",
            extra={"path": path, "action": decision.action.value},
        )
        return RedirectResponse(decision.location, status_code=307)
