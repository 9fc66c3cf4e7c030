"""Response normalization shared by every SignNow endpoint."""

import json
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

Callback = Callable[[Optional["ApiError"], Any], None]

_CHUNK_SIZE = 8192


class ApiError(Exception):
    """Normalized failure of a single API call."""

    def __init__(self, message: Any, status_code: Optional[int] = None, raw: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.raw = raw

    def __str__(self) -> str:
        message = self.message if isinstance(self.message, str) else json.dumps(self.message)
        if self.status_code is None:
            return message
        return f"{self.status_code}: {message}"


class TransportError(ApiError):
    """Raised when the connection fails before a full response arrives."""


class HttpError(ApiError):
    """Raised for a non-2xx response; ``message`` holds the server detail."""


class ParseError(ApiError):
    """Raised when a 2xx response body is not valid JSON."""


class Continuation:
    """Wraps an error-first callback so that it fires exactly once."""

    def __init__(self, callback: Callback):
        self._callback = callback
        self.fired = False

    @classmethod
    def of(cls, callback: Callback) -> "Continuation":
        if isinstance(callback, Continuation):
            return callback
        return cls(callback)

    def __call__(self, error: Optional[ApiError], result: Any = None) -> None:
        if self.fired:
            logger.warning("Dropping duplicate completion: %s", error if error is not None else "result")
            return
        self.fired = True
        self._callback(error, result)


def parse_json_body(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


def response_handler(callback: Callback) -> Callable[[Any], None]:
    """Return a handler that reads a streamed response into ``callback``.

    Transport exceptions raised while the body streams propagate to the
    caller, which routes them to :func:`error_handler`.
    """
    continuation = Continuation.of(callback)

    def handle(response: Any) -> None:
        buffer = bytearray()
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            if chunk:
                buffer.extend(chunk)
        raw = bytes(buffer)
        text = raw.decode("utf-8", errors="replace")
        status = response.status_code

        try:
            parsed = parse_json_body(raw)
        except ValueError as e:
            if 200 <= status < 300:
                continuation(ParseError(
                    f"Non-JSON response | status={status} | body={text[:200]!r} | error={e}",
                    status_code=status,
                    raw=text,
                ))
            else:
                continuation(HttpError(text, status_code=status, raw=text))
            return

        if 200 <= status < 300:
            continuation(None, parsed)
        else:
            continuation(HttpError(parsed, status_code=status, raw=text))

    return handle


def error_handler(callback: Callback) -> Callable[[BaseException], None]:
    """Return a handler reporting a connection-level failure to ``callback``."""
    continuation = Continuation.of(callback)

    def handle(exc: BaseException) -> None:
        continuation(TransportError(str(exc) or exc.__class__.__name__, raw=exc))

    return handle
