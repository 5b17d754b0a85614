"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Ada Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from app.core.database import SessionLocal, connect_db
from app.services.auth import DuplicateCredentialError, register_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user through the registration path.")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Login email (must be unique)")
    parser.add_argument("password", help="Plain-text password (stored as a bcrypt hash)")
    parser.add_argument("role", nargs="?", default="user", help="Free-form role (default: user)")
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email:
        print("Email must be non-empty.", file=sys.stderr)
        return 1

    if not connect_db():
        return 1
    db = SessionLocal()
    try:
        user = register_user(
            db,
            name=args.name,
            email=email,
            password=args.password,
            role=args.role,
        )
        print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
        return 0
    except DuplicateCredentialError:
        print(f"User '{email}' already exists.", file=sys.stderr)
        return 1
    except SQLAlchemyError as e:
        logger.exception("Could not create user: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
