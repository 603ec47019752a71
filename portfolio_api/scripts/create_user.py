"""
Create a user (e.g. first admin) without going through registration. Run from project root:
  python -m portfolio_api.scripts.create_user EMAIL PASSWORD [--name NAME] [--role ROLE]
Example:
  python -m portfolio_api.scripts.create_user admin@example.com your-secure-password --name Admin
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from portfolio_api.core.config import get_settings
from portfolio_api.core.database import Database
from portfolio_api.core.errors import DuplicateKey
from portfolio_api.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from portfolio_api.services.users import register_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a portfolio admin user.")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--name", default="Admin", help="Display name")
    parser.add_argument("--role", default="admin", help="Role label (informational)")
    args = parser.parse_args(argv)

    email = args.email.strip().lower()
    if "@" not in email:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    load_dotenv()
    settings = get_settings()
    database = Database(settings.DATABASE_URL)
    if settings.DATABASE_CREATE_TABLES:
        database.create_tables()
    db = database.session()
    try:
        user = register_user(db, name=args.name.strip(), email=email, password=args.password, role=args.role)
    except DuplicateKey:
        print(f"User '{email}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
        database.dispose()
    print(f"Created user '{user.email}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
