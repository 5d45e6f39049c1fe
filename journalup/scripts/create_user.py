"""
Create a user without going through the API. Run from project root:
  python -m journalup.scripts.create_user EMAIL PASSWORD
Example:
  python -m journalup.scripts.create_user coach@example.com your-secure-password
"""
import argparse
import sys

from journalup.core.database import SessionLocal
from journalup.core.errors import ConflictError
from journalup.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    hash_password,
)
from journalup.repositories.users import UserRepository


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Journal Up user.")
    parser.add_argument("email", help=f"Email address (up to {EMAIL_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email or "@" not in email or len(email) > EMAIL_MAX_LEN:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        user = UserRepository(db).create(email, hash_password(args.password))
        print(f"Created user '{email}' with id {user.id}.")
        return 0
    except ConflictError:
        print(f"User '{email}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
