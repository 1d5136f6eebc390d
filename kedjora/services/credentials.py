"""Credential verification against stored bcrypt hashes."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kedjora.core.security import dummy_password_hash, verify_password
from kedjora.models.user import User
from kedjora.schemas.auth import AuthenticatedIdentity

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_NAME = "Admin"


def verify_credentials(db: Session, email: str, password: str) -> AuthenticatedIdentity | None:
    """
    Check an email/password pair. Returns the identity, or None on any failure.

    Unknown email, wrong password and database errors all return None, and the
    first two are logged identically so logs cannot be used to enumerate users.
    """
    if not email or not password:
        return None

    try:
        return _check(db, email, password)
    except SQLAlchemyError:
        logger.exception("Credential lookup failed; rejecting login")
        return None
    except Exception:
        logger.exception("Credential check failed unexpectedly; rejecting login")
        return None


def _check(db: Session, email: str, password: str) -> AuthenticatedIdentity | None:
    user = db.query(User).filter(User.email == email).first()
    if user is None:
        # Same bcrypt cost as a real comparison.
        verify_password(password, dummy_password_hash())
        logger.info("Login rejected: invalid credentials")
        return None
    if not verify_password(password, user.password_hash):
        logger.info("Login rejected: invalid credentials")
        return None

    return AuthenticatedIdentity(
        id=user.id,
        name=user.name or DEFAULT_DISPLAY_NAME,
        email=user.email,
        role=user.role,
    )
