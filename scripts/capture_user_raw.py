"""Capture raw token and user endpoint responses for schema documentation.

Run with application credentials configured (env vars or keyring):
    python3 scripts/capture_user_raw.py <username> <password> [--dev]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional

from signnow_client import Authorization, RequestIntent, SignNowClient
from signnow_client.client.request import build_request_options
from signnow_client.utils import encode_form


def _safe_json(response) -> Any:
    try:
        return response.json()
    except Exception:
        return {"_non_json_body": (response.text or "")[:4000]}


def _record(client: SignNowClient, intent: RequestIntent) -> Dict[str, Any]:
    options = build_request_options(intent, client.target)
    response = client.session.request(
        options.method, options.url, headers=options.headers, data=options.body
    )
    return {
        "request": {"method": options.method, "url": options.url},
        "response": {
            "status_code": response.status_code,
            "headers": dict(response.headers),
            "json_or_text": _safe_json(response),
        },
    }


def access_token_from(record: Dict[str, Any]) -> Optional[str]:
    body = record["response"]["json_or_text"]
    return body.get("access_token") if isinstance(body, dict) else None

def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("username")
    parser.add_argument("password")
    parser.add_argument("--dev", action="store_true")
    args = parser.parse_args()

    client = SignNowClient.from_config(production=not args.dev)
    out: Dict[str, Any] = {"endpoints": {}}

    body, headers = encode_form({"grant_type": "password", "username": args.username, "password": args.password})
    token_record = _record(client, RequestIntent(
        method="POST",
        path="/oauth2/token",
        authorization=Authorization.basic(client.credentials),
        headers=headers,
        body=body,
    ))
    out["endpoints"]["oauth2_token"] = token_record

    access_token = access_token_from(token_record)
    if access_token:
        bearer = Authorization.bearer(access_token)
        out["endpoints"]["oauth2_token_verify"] = _record(
            client, RequestIntent(method="GET", path="/oauth2/token", authorization=bearer)
        )
        out["endpoints"]["user"] = _record(
            client, RequestIntent(method="GET", path="/user", authorization=bearer)
        )

    out_path = Path("captures/user_raw.json")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(out, indent=2, ensure_ascii=True), encoding="utf-8")
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
