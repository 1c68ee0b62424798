"""
Create an account directly (e.g. the first admin). Run from project root:
  python -m hotelbook.scripts.create_user USERNAME EMAIL PASSWORD [--admin]
Example:
  python -m hotelbook.scripts.create_user admin admin@example.com your-secure-password --admin
"""
import argparse
import sys

import pydantic

from hotelbook.core.database import SessionLocal
from hotelbook.core.errors import ConflictError
from hotelbook.core.security import hash_password
from hotelbook.models import Account
from hotelbook.schemas.auth import RegisterRequest
from hotelbook.services.accounts import commit_account, ensure_unique_identity


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Hotelbook account, optionally an admin.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("--admin", action="store_true", help="Grant admin rights")
    parser.add_argument("--phone", default="-", help="Phone number")
    parser.add_argument("--country", default="-", help="Country")
    parser.add_argument("--city", default="-", help="City")
    args = parser.parse_args(argv)

    try:
        profile = RegisterRequest(
            username=args.username,
            email=args.email,
            password=args.password,
            phone=args.phone,
            country=args.country,
            city=args.city,
        )
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        print(f"Invalid {field}: {first['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        ensure_unique_identity(db, profile.username, profile.email)
        account = Account(
            username=profile.username,
            email=profile.email,
            password_hash=hash_password(profile.password),
            phone=profile.phone,
            country=profile.country,
            city=profile.city,
            is_admin=args.admin,
        )
        db.add(account)
        commit_account(db)
    except ConflictError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    role = "admin" if args.admin else "user"
    print(f"Created {role} '{profile.username}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
