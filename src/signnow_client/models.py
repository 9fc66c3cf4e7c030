"""Pydantic models shared by the SignNow request helpers."""

from enum import Enum
from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, model_validator


class ApiHost(str, Enum):
    PRODUCTION = "api.signnow.com"
    SANDBOX = "api-eval.signnow.com"

    @classmethod
    def select(cls, production: bool) -> "ApiHost":
        return cls.PRODUCTION if production else cls.SANDBOX


class ApiTarget(BaseModel):
    """Host and path prefix every request of a configured client goes to."""
    model_config = {"frozen": True}

    host: ApiHost = ApiHost.PRODUCTION
    base_path: str = ""

    @classmethod
    def for_environment(cls, production: bool = True) -> "ApiTarget":
        return cls(host=ApiHost.select(production))


class AuthType(str, Enum):
    NONE = "None"
    BASIC = "Basic"
    BEARER = "Bearer"


class Authorization(BaseModel):
    """Authorization mode of a request.

    ``BASIC`` carries the base64 ``client_id:client_secret`` credentials,
    ``BEARER`` carries a user access token, ``NONE`` sends no header.
    """
    model_config = {"frozen": True}

    type: AuthType = AuthType.NONE
    credentials: Optional[str] = None
    token: Optional[str] = None

    @model_validator(mode="after")
    def _check_secret(self) -> "Authorization":
        if self.type is AuthType.BASIC and not self.credentials:
            raise ValueError("Basic authorization requires client credentials")
        if self.type is AuthType.BEARER and not self.token:
            raise ValueError("Bearer authorization requires an access token")
        return self

    @classmethod
    def none(cls) -> "Authorization":
        return cls(type=AuthType.NONE)

    @classmethod
    def basic(cls, credentials: str) -> "Authorization":
        return cls(type=AuthType.BASIC, credentials=credentials)

    @classmethod
    def bearer(cls, token: str) -> "Authorization":
        return cls(type=AuthType.BEARER, token=token)

    def header_value(self) -> Optional[str]:
        if self.type is AuthType.BASIC:
            return f"Basic {self.credentials}"
        if self.type is AuthType.BEARER:
            return f"Bearer {self.token}"
        return None


class RequestIntent(BaseModel):
    model_config = {"frozen": True}

    method: Literal["GET", "POST", "PUT", "DELETE"]
    path: str
    authorization: Authorization = Field(default_factory=Authorization.none)
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[bytes] = None


class TransportRequestOptions(BaseModel):
    """Everything ``requests`` needs to send one call."""
    model_config = {"frozen": True}

    method: str
    url: str
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[bytes] = None
