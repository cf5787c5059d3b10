"""
Create a user (e.g. the first admin) without going through registration. Run from project root:
  python -m acadtrack.scripts.create_user EMAIL PASSWORD FIRSTNAME LASTNAME [role]
Example:
  python -m acadtrack.scripts.create_user admin@school.edu your-secure-password Ada Lovelace admin
"""
import argparse
import logging
import sys

from sqlalchemy.exc import IntegrityError

from acadtrack.core.database import SessionLocal
from acadtrack.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from acadtrack.models.user import ROLE_ADMIN, ROLE_USER, User
from acadtrack.services.users import normalize_email

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an AcadTrack user.")
    parser.add_argument("email", help="Email address (stored lower-cased)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("firstname")
    parser.add_argument("lastname")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=[ROLE_USER, ROLE_ADMIN])
    args = parser.parse_args(argv)

    email = normalize_email(args.email)
    firstname = args.firstname.strip()
    lastname = args.lastname.strip()
    if not email or not firstname or not lastname:
        logger.error("Email, first name and last name must be non-empty.")
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        logger.error("Password must be %s-%s characters.", PASSWORD_MIN_LEN, PASSWORD_MAX_LEN)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            logger.error("User '%s' already exists.", email)
            return 1
        user = User(
            firstname=firstname,
            lastname=lastname,
            email=email,
            password_hash=hash_password(args.password),
            role=args.role,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.error("User '%s' already exists.", email)
            return 1
        logger.info("Created user '%s' with role '%s'.", email, args.role)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
