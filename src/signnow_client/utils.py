"""Request body encoders shared by the endpoint mixins."""

import json
from typing import Any, Dict, Mapping, Tuple
from urllib.parse import urlencode


def drop_none(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy a mapping without its ``None`` values, keeping key order."""
    return {key: value for key, value in data.items() if value is not None}


def encode_form(data: Mapping[str, Any]) -> Tuple[bytes, Dict[str, str]]:
    """Encode ``data`` as an ``application/x-www-form-urlencoded`` body.

    Returns the body bytes and the ``Content-Type``/``Content-Length``
    headers that go with it.
    """
    body = urlencode(drop_none(data)).encode("utf-8")
    return body, {
        "Content-Type": "application/x-www-form-urlencoded",
        "Content-Length": str(len(body)),
    }


def encode_json(data: Mapping[str, Any]) -> Tuple[bytes, Dict[str, str]]:
    """Encode ``data`` as a compact JSON body plus its content headers."""
    body = json.dumps(drop_none(data), separators=(",", ":")).encode("utf-8")
    return body, {
        "Content-Type": "application/json",
        "Content-Length": str(len(body)),
    }

