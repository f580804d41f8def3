"""
Create an account (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD [--name NAME] [--role user|admin]
Example:
  python -m app.scripts.create_user admin@example.com your-secure-password --role admin
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from app.core.database import get_sessionmaker
from app.core.security import hash_password
from app.models import ROLE_USER, ROLES
from app.services.accounts import AccountStoreError, EmailAlreadyExistsError, SqlAccountStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an account (admins can only be created here).")
    parser.add_argument("email", help="Login email (stored lower-cased)")
    parser.add_argument("password", help="Password")
    parser.add_argument("--name", default=None, help="Optional display name")
    parser.add_argument("--role", default=ROLE_USER, choices=list(ROLES))
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email or not args.password:
        print("email & password required", file=sys.stderr)
        return 1

    load_dotenv()
    db = get_sessionmaker()()
    try:
        account = SqlAccountStore(db).insert_account(
            name=args.name,
            email=email,
            password_hash=hash_password(args.password),
            role=args.role,
        )
    except EmailAlreadyExistsError:
        print(f"Account '{email.lower()}' already exists.", file=sys.stderr)
        return 1
    except AccountStoreError as e:
        logger.error("Could not create account: %s", e.message)
        return 1
    finally:
        db.close()

    print(f"Created account '{account.email}' (id={account.id}) with role '{account.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
