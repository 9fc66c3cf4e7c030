"""``signnow-setup``: store or remove SignNow application credentials in the keyring."""

import argparse
import getpass
import sys
from typing import List, Optional

from .config import (
    PRODUCTION,
    SANDBOX,
    SERVICE_NAME,
    delete_client_credentials,
    load_client_credentials,
    save_client_credentials,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="signnow-setup",
        description=f"Manage SignNow client credentials in the system keyring (service: {SERVICE_NAME}).",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--sandbox",
        action="store_true",
        help="Mark the stored application as a developer sandbox app.",
    )
    group.add_argument(
        "--delete",
        action="store_true",
        help="Remove stored credentials instead of saving new ones.",
    )
    return parser.parse_args(argv)


def _delete() -> int:
    if delete_client_credentials():
        print("Stored credentials removed.")
        return 0
    print("No stored credentials removed.", file=sys.stderr)
    return 1


def _store(production: bool) -> int:
    client_id, _ = load_client_credentials()
    if client_id:
        print(f"Existing credentials found (client id: {client_id})")
        if input("Overwrite? [y/N]: ").strip().lower() != "y":
            print("Keeping existing credentials.")
            return 0

    client_id = input("Client id: ").strip()
    client_secret = getpass.getpass("Client secret: ").strip()
    if not client_id or not client_secret:
        print("Client id and secret are both required.", file=sys.stderr)
        return 1

    if not save_client_credentials(client_id, client_secret, production=production):
        print("Failed to save credentials.", file=sys.stderr)
        return 1
    print(f"Credentials saved for the {PRODUCTION if production else SANDBOX} API.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.delete:
        return _delete()
    return _store(production=not args.sandbox)


if __name__ == "__main__":
    raise SystemExit(main())
