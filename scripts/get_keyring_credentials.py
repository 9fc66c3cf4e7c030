#!/usr/bin/env python3
"""Show what ``signnow-setup`` stored in the system keyring."""

from __future__ import annotations

import argparse
import json
import sys

import keyring

from signnow_client.config import (
    CLIENT_ID_KEY,
    CLIENT_SECRET_KEY,
    ENVIRONMENT_KEY,
    PRODUCTION,
    SERVICE_NAME,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--show-secret",
        action="store_true",
        help="Print the client secret in clear text (off by default).",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON for scripts.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    stored = {key: keyring.get_password(SERVICE_NAME, key) for key in (CLIENT_ID_KEY, CLIENT_SECRET_KEY, ENVIRONMENT_KEY)}
    if not stored[CLIENT_ID_KEY] and not stored[CLIENT_SECRET_KEY]:
        print(f"Nothing stored in keyring service '{SERVICE_NAME}'. Run signnow-setup.", file=sys.stderr)
        return 1

    secret = stored[CLIENT_SECRET_KEY]
    if secret and not args.show_secret:
        secret = "*" * 8
    report = {
        "client_id": stored[CLIENT_ID_KEY],
        "client_secret": secret,
        "environment": stored[ENVIRONMENT_KEY] or f"{PRODUCTION} (default)",
    }

    if args.json:
        print(json.dumps(report, ensure_ascii=True))
    else:
        for key, value in report.items():
            print(f"{key}: {value or '<missing>'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
