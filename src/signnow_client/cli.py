"""Remove a SignNow document on behalf of a user.

Usage:
    signnow-remove-document <client_id> <client_secret> <username> <password> <document_id>
        [--cancel-invites] [--dev]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from .client import ApiError, SignNowClient
from .config import encode_credentials


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="signnow-remove-document",
        description="Request an access token for a user, then remove one of their documents.",
    )
    parser.add_argument("client_id", help="Application client id")
    parser.add_argument("client_secret", help="Application client secret")
    parser.add_argument("username", help="Email of the document owner")
    parser.add_argument("password", help="Password of the document owner")
    parser.add_argument("document_id", help="Id of the document to remove")
    parser.add_argument(
        "--cancel-invites",
        action="store_true",
        help="Cancel pending invites of the document before removing it.",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Send requests to the developer sandbox API.",
    )
    return parser.parse_args(argv)


async def remove_document(args: argparse.Namespace) -> Dict[str, Any]:
    client = SignNowClient(
        credentials=encode_credentials(args.client_id, args.client_secret),
        production=not args.dev,
    )
    token = await client.request_token(username=args.username, password=args.password)
    return await client.remove_document(
        args.document_id,
        token.access_token,
        cancel_invites=args.cancel_invites,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        result = asyncio.run(remove_document(args))
    except (ApiError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
