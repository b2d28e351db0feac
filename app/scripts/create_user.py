"""
Create a user account without going through the signup page. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD
Example:
  python -m app.scripts.create_user admin@example.com 'a-long-secure-password'
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from app.schemas.auth import RegistrationForm
from app.services.registration import RegistrationError, create_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user account (same rules as signup).")
    parser.add_argument("email_address", help="Email address (normalized before storage)")
    parser.add_argument(
        "password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)"
    )
    args = parser.parse_args(argv)

    form = RegistrationForm(
        email_address=args.email_address,
        password=args.password,
        password_confirmation=args.password,
    )
    db = SessionLocal()
    try:
        user = create_user(db, form)
        db.commit()
        print(f"Created user '{user.email_address}'.")
        return 0
    except RegistrationError as e:
        db.rollback()
        for error in e.errors or [e.message]:
            print(error, file=sys.stderr)
        return 1
    except Exception as e:
        db.rollback()
        logger.exception("User creation failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
