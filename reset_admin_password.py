#!/usr/bin/env python3
"""
Reset an administrator's password in the catalog SQLite database.

This script does not read or reveal any existing passwords.  It sets a
new PBKDF2-HMAC-SHA256 hash (format "salthex$hashhex") for the given
admin username.

Usage:
    python reset_admin_password.py --db ./catalog.db --username ADMIN --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import os
import sys

from catalog_api.app.core.db import Store
from catalog_api.app.core.security import hash_password


def reset_password(db_path: str, username: str, new_password: str) -> bool:
    """Store a new hash for ``username``; return False if no such admin."""
    with Store(db_path).cursor() as cursor:
        cursor.execute(
            "UPDATE admins SET password = ? WHERE username = ?",
            (hash_password(new_password), username),
        )
        return cursor.rowcount > 0


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Reset a catalog admin password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./catalog.db)")
    ap.add_argument("--username", required=True, help="Admin username to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args(argv)

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        return 1

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return 1

    if not reset_password(os.path.abspath(args.db), args.username, new_password):
        print(f"[!] No admin found with username: {args.username}", file=sys.stderr)
        return 2

    print(f"[+] Password updated for admin: {args.username}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
