"""SignNowClient composed from endpoint mixins."""

import asyncio
import logging
import sys
from typing import Any, Optional

import requests

from ..config import ConfigError, encode_credentials, load_client_credentials, load_environment
from ..models import ApiTarget, RequestIntent
from .common import ApiError, Callback, Continuation, error_handler, response_handler
from .document import DocumentMixin
from .oauth2 import OAuth2Mixin
from .request import build_request_options
from .user import UserMixin

# ---------------------------------------------------------------------------
# Configure the package-level logger once.  A single StreamHandler on stderr
# ensures all child loggers (signnow_client.client, signnow_client.config, …)
# propagate here.  stdout is reserved for CLI results.
# ---------------------------------------------------------------------------
_root_logger = logging.getLogger("signnow_client")
if not _root_logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _root_logger.addHandler(_handler)
    _root_logger.setLevel(logging.DEBUG)  # allow children to decide their own level

USER_AGENT = "signnow-client-python"


class SignNowClient(
    OAuth2Mixin,
    UserMixin,
    DocumentMixin,
):
    """SignNow API client.

    Args:
        credentials: base64 ``client_id:client_secret`` of the application
        production: target the production API instead of the sandbox
        session: optional preconfigured ``requests.Session``
        timeout: seconds passed to ``requests``; no timeout when None
    """

    def __init__(
        self,
        credentials: str,
        production: bool = True,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        if not credentials:
            raise ConfigError("Client credentials are required")
        self.credentials = credentials
        self.target = ApiTarget.for_environment(production)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logging.getLogger("signnow_client.client")
        self.logger.setLevel(logging.INFO)

        self.session.headers.update({'User-Agent': USER_AGENT})

    @classmethod
    def from_config(cls, production: Optional[bool] = None, **kwargs: Any) -> "SignNowClient":
        """Build a client from environment variables or the system keyring.

        When ``production`` is None the stored environment decides the host.
        """
        client_id, client_secret = load_client_credentials()
        if not client_id or not client_secret:
            raise ConfigError(
                "Client credentials not found. Set SIGNNOW_CLIENT_ID and "
                "SIGNNOW_CLIENT_SECRET or run signnow-setup."
            )
        if production is None:
            production = load_environment()
        return cls(encode_credentials(client_id, client_secret), production=production, **kwargs)

    def dispatch(self, intent: RequestIntent, callback: Callback) -> None:
        """Send one request and report its outcome to ``callback`` exactly once.

        ``callback`` is called as ``callback(error, result)`` with either an
        :class:`ApiError` or the parsed JSON body.
        """
        options = build_request_options(intent, self.target)
        continuation = Continuation.of(callback)
        on_response = response_handler(continuation)
        on_error = error_handler(continuation)

        self.logger.debug(f"{options.method} {options.url}")
        try:
            response = self.session.request(
                options.method,
                options.url,
                headers=options.headers,
                data=options.body,
                stream=True,
                timeout=self.timeout,
            )
            with response:
                on_response(response)
        except requests.RequestException as e:
            if continuation.fired:
                # raised by the callback itself, not by the transport
                raise
            on_error(e)

    async def _call(self, intent: RequestIntent) -> Any:
        """Dispatch ``intent`` and return its payload or raise its ApiError."""
        future = asyncio.get_running_loop().create_future()

        def settle(error: Optional[ApiError], result: Any) -> None:
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(result)

        self.dispatch(intent, settle)
        return await future


__all__ = ["ApiError", "SignNowClient"]
