"""
Bootstrap the default admin account if it does not exist. Run from project root:

  python -m kedjora.scripts.seed

Email, password and display name come from SEED_ADMIN_EMAIL,
SEED_ADMIN_PASSWORD and SEED_ADMIN_NAME.
"""

import logging
import sys

from sqlalchemy.orm import Session

from kedjora.core.config import get_settings
from kedjora.core.database import build_engine, build_session_factory
from kedjora.core.security import BCRYPT_ROUNDS, hash_password
from kedjora.models import Role, User

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def seed_admin(
    db: Session,
    email: str,
    password: str,
    name: str,
    rounds: int = BCRYPT_ROUNDS,
) -> bool:
    """Create the admin user unless one with this email exists. Returns True if created."""
    if db.query(User).filter(User.email == email).first() is not None:
        logger.info("Admin user already exists")
        return False
    password_hash = hash_password(password, rounds=rounds)
    db.add(
        User(
            email=email,
            password_hash=password_hash,
            name=name,
            role=Role.ADMIN.value,
        )
    )
    db.commit()
    logger.info("Admin user created: %s", email)
    return True


def main() -> int:
    settings = get_settings()
    engine = build_engine(settings.DATABASE_URL)
    db = build_session_factory(engine)()
    try:
        seed_admin(
            db,
            settings.SEED_ADMIN_EMAIL,
            settings.SEED_ADMIN_PASSWORD.get_secret_value(),
            settings.SEED_ADMIN_NAME,
        )
        return 0
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
