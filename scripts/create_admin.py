"""
Name: Admin Bootstrap Script

Responsibilities:
  - Create an admin (or user) account (idempotent)
  - Hash passwords with Argon2
  - Store user in PostgreSQL

Usage:
  DATABASE_URL=postgresql://... python scripts/create_admin.py --email admin@example.com
"""

from __future__ import annotations

import argparse
import getpass
import os
import sys

import psycopg

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from taskmanager.identity.passwords import hash_password  # noqa: E402
from taskmanager.identity.users import UserRole  # noqa: E402


def _require_database_url() -> str:
    db_url = os.getenv("DATABASE_URL")
    if not db_url:
        raise SystemExit("DATABASE_URL is required to create a user.")
    return db_url


def _normalize_email(email: str) -> str:
    normalized = email.strip()
    if not normalized:
        raise SystemExit("Email is required.")
    return normalized


def _prompt_email() -> str:
    return _normalize_email(input("Email: "))


def _prompt_password() -> str:
    password = getpass.getpass("Password: ")
    if not password:
        raise SystemExit("Password is required.")
    confirm = getpass.getpass("Confirm password: ")
    if password != confirm:
        raise SystemExit("Passwords do not match.")
    return password


def _parse_args() -> argparse.Namespace:
    argv = sys.argv[1:]
    if argv and argv[0] == "--":
        argv = argv[1:]
    parser = argparse.ArgumentParser(
        description="Create an admin user (idempotent)."
    )
    parser.add_argument("--email", help="User email (surrounding spaces are stripped)")
    parser.add_argument(
        "--password",
        help="User password (omit to be prompted securely)",
    )
    parser.add_argument(
        "--role",
        default=UserRole.ADMIN.value,
        choices=[role.value for role in UserRole],
        help="User role (default: Admin)",
    )
    return parser.parse_args(argv)


def _maybe_create_user(db_url: str, email: str, password: str, role: str) -> None:
    with psycopg.connect(db_url) as conn:
        with conn.cursor() as cur:
            cur.execute(
                "SELECT id, role FROM users WHERE email = %s",
                (email,),
            )
            row = cur.fetchone()
            if row:
                print(f"User already exists: id={row[0]} email={email} role={row[1]}")
                return

            cur.execute(
                """
                INSERT INTO users (email, password_hash, role)
                VALUES (%s, %s, %s)
                RETURNING id
                """,
                (email, hash_password(password), role),
            )
            user_id = cur.fetchone()[0]
            conn.commit()
            print(f"Created user: id={user_id} email={email} role={role}")


def main() -> None:
    args = _parse_args()
    db_url = _require_database_url()
    email = _normalize_email(args.email) if args.email else _prompt_email()
    password = args.password or _prompt_password()
    _maybe_create_user(db_url, email=email, password=password, role=args.role)


if __name__ == "__main__":
    main()
