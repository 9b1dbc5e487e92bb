#!/usr/bin/env python3
"""
Print a PBKDF2 hash for a super admin password.

Paste the output into super_admins.password_hash to replace a legacy
plaintext secret:

    python scripts/hash_password.py
"""
import argparse
import getpass
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.auth import hash_password  # noqa: E402


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Hash a super admin password")
    parser.add_argument("--password", help="Password to hash (prompted for when omitted)")
    args = parser.parse_args(argv)

    password = args.password
    if password is None:
        password = getpass.getpass("Password: ")
        if password != getpass.getpass("Confirm: "):
            print("Passwords do not match.", file=sys.stderr)
            return 1
    password = password.strip()
    if not password:
        print("Password cannot be empty.", file=sys.stderr)
        return 1

    print(hash_password(password))
    return 0


if __name__ == "__main__":
    sys.exit(main())
