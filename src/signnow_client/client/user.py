"""User mixin for SignNowClient."""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..models import Authorization, RequestIntent
from ..utils import encode_json


class UserCreateResponse(BaseModel):
    model_config = {"extra": "allow"}

    id: str
    verified: Optional[int] = None
    email: Optional[str] = None

    def __str__(self) -> str:
        return f"user id: {self.id} | email={self.email} | verified={self.verified}"


class UserVerifyEmailResponse(BaseModel):
    model_config = {"extra": "allow"}

    status: str


class UserMixin:
    """Handles user creation, retrieval, email verification and settings."""

    async def create_user(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        number: Optional[str] = None,
        verify_email: bool = False,
        start_trial: bool = False,
    ) -> UserCreateResponse:
        """Create a new user account.

        Args:
            verify_email: send a verification email once the user exists; only
                an error from that request changes the outcome, whatever it
                acknowledges with is ignored
            start_trial: start the 30 day free trial for the new account
        """
        body, headers = encode_json({
            "skip_30day_trial": 0 if start_trial else 1,
            "email": email,
            "password": password,
            "first_name": first_name,
            "last_name": last_name,
            "number": number,
        })
        data = await self._call(RequestIntent(
            method="POST",
            path="/user",
            authorization=Authorization.basic(self.credentials),
            headers=headers,
            body=body,
        ))
        created = UserCreateResponse.model_validate(data)
        self.logger.info(f"Created user {created.id}")

        if verify_email:
            await self._call(self._verify_email_intent(email))
        return created

    async def get_user(self, token: str) -> Dict[str, Any]:
        """Retrieve account details of the user owning ``token``.

        An empty ``token`` raises ``ValueError`` (pydantic ``ValidationError``)
        before any request is sent.
        """
        return await self._call(RequestIntent(
            method="GET",
            path="/user",
            authorization=Authorization.bearer(token),
        ))

    def _verify_email_intent(self, email: str) -> RequestIntent:
        body, headers = encode_json({"email": email})
        return RequestIntent(
            method="POST",
            path="/user/verifyemail",
            authorization=Authorization.basic(self.credentials),
            headers=headers,
            body=body,
        )

    async def verify_email(self, email: str) -> UserVerifyEmailResponse:
        """Send an email with a verification link to the user."""
        data = await self._call(self._verify_email_intent(email))
        return UserVerifyEmailResponse.model_validate(data)

    async def deactivate_reusable_signatures(self, token: str) -> Dict[str, Any]:
        """Turn off signature reuse for the user owning ``token``.

        An empty ``token`` raises ``ValueError`` before any request is sent.
        """
        body, headers = encode_json({"active": 1})
        return await self._call(RequestIntent(
            method="PUT",
            path="/user/setting/no_user_signature_return",
            authorization=Authorization.bearer(token),
            headers=headers,
            body=body,
        ))
