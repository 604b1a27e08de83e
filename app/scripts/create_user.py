"""
Create an account from the command line. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD "FULL NAME" [role]
Example:
  python -m app.scripts.create_user ops@example.com your-secure-password "Ops Team" admin
"""
import argparse
import sys

from app.core.database import SessionLocal, init_db
from app.core.errors import AppError
from app.core.security import BCRYPT_MAX_PASSWORD_BYTES, password_too_long
from app.models import ROLE_ADMIN, ROLE_USER
from app.services.accounts import create_account, normalize_email


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a storefront account.")
    parser.add_argument("email", help="Login email (stored lower-cased)")
    parser.add_argument("password", help=f"Password (1-{BCRYPT_MAX_PASSWORD_BYTES} bytes as UTF-8)")
    parser.add_argument("full_name", help="Display name")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=[ROLE_USER, ROLE_ADMIN])
    args = parser.parse_args(argv)

    email = normalize_email(args.email)
    if not email or "@" not in email:
        print("Invalid email.", file=sys.stderr)
        return 1
    if not args.password or password_too_long(args.password):
        print(f"Password must be 1-{BCRYPT_MAX_PASSWORD_BYTES} bytes.", file=sys.stderr)
        return 1

    init_db()
    db = SessionLocal()
    try:
        user = create_account(
            db,
            full_name=args.full_name,
            email=email,
            password=args.password,
            role=args.role,
        )
    except AppError as e:
        print(f"Could not create '{email}': {e.code}", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created account '{email}' (id {user.id}) with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
