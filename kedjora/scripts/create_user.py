"""
Create an admin user with explicit credentials. Run from project root:
  python -m kedjora.scripts.create_user EMAIL PASSWORD [--name NAME]
Example:
  python -m kedjora.scripts.create_user owner@kedjora.id your-secure-password --name Owner
"""
import argparse
import sys

from kedjora.core.config import get_settings
from kedjora.core.database import build_engine, build_session_factory
from kedjora.core.security import PASSWORD_MAX_LEN, hash_password
from kedjora.models import Role, User

MIN_CLI_PASSWORD_LEN = 8


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Kedjora admin user (no registration UI).")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help=f"Password ({MIN_CLI_PASSWORD_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--name", default=None, help="Display name")
    parser.add_argument("--role", default=Role.ADMIN.value, choices=[r.value for r in Role])
    args = parser.parse_args(argv)

    email = args.email.strip()
    if "@" not in email or len(email) > 255:
        print("Invalid email.", file=sys.stderr)
        return 1
    if len(args.password) < MIN_CLI_PASSWORD_LEN or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be {MIN_CLI_PASSWORD_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    settings = get_settings()
    engine = build_engine(settings.DATABASE_URL)
    db = build_session_factory(engine)()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(
            email=email,
            password_hash=hash_password(args.password),
            name=args.name,
            role=args.role,
        )
        db.add(user)
        db.commit()
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
