"""Shared fixtures: a fake streamed response and a client on a mocked session."""

import json
from typing import Any, List, Optional
from unittest.mock import MagicMock

import pytest

from signnow_client import SignNowClient, encode_credentials

CREDENTIALS = encode_credentials("client-id", "client-secret")


class FakeResponse:
    """Minimal stand-in for a streamed ``requests.Response``."""

    def __init__(self, status_code: int = 200, body: Any = None, chunks: Optional[List[bytes]] = None,
                 error: Optional[Exception] = None):
        self.status_code = status_code
        if chunks is None:
            raw = body if isinstance(body, bytes) else json.dumps(body).encode()
            chunks = [raw[:3], raw[3:]]
        self._chunks = chunks
        self._error = error
        self.closed = False

    def iter_content(self, chunk_size=1):
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


class Recorder:
    """Error-first callback that remembers every invocation."""

    def __init__(self):
        self.calls = []

    def __call__(self, error, result=None):
        self.calls.append((error, result))


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    return SignNowClient(CREDENTIALS, production=True, session=session)


def sent_request(session, index: int = -1):
    """Return (method, url, kwargs) of a call made on the mocked session."""
    call = session.request.call_args_list[index]
    method, url = call.args
    return method, url, call.kwargs
