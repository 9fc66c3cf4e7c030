"""OAuth2 mixin for SignNowClient."""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..models import Authorization, RequestIntent
from ..utils import drop_none, encode_form

TOKEN_PATH = "/oauth2/token"

# grant_type -> fields the token endpoint requires for it
_GRANT_REQUIREMENTS = {
    "password": ("username", "password"),
    "refresh_token": ("refresh_token",),
    "authorization_code": ("code",),
}


class AccessToken(BaseModel):
    model_config = {"extra": "allow"}

    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.token_type or 'token'} | expires_in={self.expires_in} | scope={self.scope}"


class TokenInfo(BaseModel):
    model_config = {"extra": "allow"}

    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None


def token_request_payload(
    username: Optional[str] = None,
    password: Optional[str] = None,
    grant_type: str = "password",
    refresh_token: Optional[str] = None,
    code: Optional[str] = None,
    scope: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the token request form fields, ``grant_type`` first."""
    payload = drop_none({
        "grant_type": grant_type,
        "username": username,
        "password": password,
        "refresh_token": refresh_token,
        "code": code,
        "scope": scope,
    })
    required = _GRANT_REQUIREMENTS.get(grant_type)
    if required is None:
        raise ValueError(f"Unsupported grant_type: {grant_type!r}")
    missing = [name for name in required if not payload.get(name)]
    if missing:
        raise ValueError(f"grant_type {grant_type!r} requires: {', '.join(missing)}")
    return payload


class OAuth2Mixin:
    """Handles access token request, refresh and verification."""

    def _token_intent(self, payload: Dict[str, Any]) -> RequestIntent:
        body, headers = encode_form(payload)
        return RequestIntent(
            method="POST",
            path=TOKEN_PATH,
            authorization=Authorization.basic(self.credentials),
            headers=headers,
            body=body,
        )

    async def request_token(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        grant_type: str = "password",
        refresh_token: Optional[str] = None,
        code: Optional[str] = None,
        scope: Optional[str] = None,
    ) -> AccessToken:
        """Request an access token for a user (password grant by default)."""
        payload = token_request_payload(
            username=username,
            password=password,
            grant_type=grant_type,
            refresh_token=refresh_token,
            code=code,
            scope=scope,
        )
        self.logger.info(f"Requesting access token (grant_type={grant_type})")
        data = await self._call(self._token_intent(payload))
        return AccessToken.model_validate(data)

    async def refresh_token(
        self,
        refresh_token: str,
        scope: Optional[str] = None,
        expiration_time: Optional[int] = None,
    ) -> AccessToken:
        """Exchange a refresh token for a new access token."""
        payload = drop_none({
            "refresh_token": refresh_token,
            "scope": scope,
            "expiration_time": expiration_time,
        })
        payload["grant_type"] = "refresh_token"
        self.logger.info("Refreshing access token")
        data = await self._call(self._token_intent(payload))
        return AccessToken.model_validate(data)

    async def verify_token(self, token: str) -> TokenInfo:
        """Verify an access token and return its details.

        An empty ``token`` raises ``ValueError`` (pydantic ``ValidationError``)
        before any request is sent.
        """
        data = await self._call(RequestIntent(
            method="GET",
            path=TOKEN_PATH,
            authorization=Authorization.bearer(token),
        ))
        return TokenInfo.model_validate(data)
