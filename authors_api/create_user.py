"""Create an account that can log in and request access tokens.

Usage:
    python -m authors_api.create_user USERNAME [--password PASSWORD]

The password is prompted for when it is not given on the command line.
"""
import argparse
import getpass
import sys

from authors_api import database
from authors_api.auth.security import AuthSecurityError, hash_password
from authors_api.schemas.auth import UserDraft
from authors_api.store.user_store import UserStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create an API user.")
    parser.add_argument("username")
    parser.add_argument("--password", default=None, help="Prompted for when omitted.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    username = args.username.strip()
    if not username:
        print("Username is required.", file=sys.stderr)
        return 1

    password = args.password if args.password is not None else getpass.getpass("Password: ")
    try:
        password_hash = hash_password(password)
    except AuthSecurityError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if not database.try_init_database(database.engine):
        print("Database is unavailable. Check DATABASE_URL.", file=sys.stderr)
        return 1

    store = UserStore(database.SessionLocal)
    result = store.create(UserDraft(username=username, password_hash=password_hash))
    if not result.ok:
        print(result.error.message, file=sys.stderr)
        return 1

    print(f"Created user {result.value.username!r} with id {result.value.id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
