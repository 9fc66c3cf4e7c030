"""Document mixin for SignNowClient."""

from typing import Any, Dict
from urllib.parse import quote

from ..models import Authorization, RequestIntent


def document_path(document_id: str, suffix: str = "") -> str:
    return f"/document/{quote(document_id, safe='')}{suffix}"


class DocumentMixin:
    """Handles field invite cancellation and document removal."""

    async def cancel_invites(self, document_id: str, token: str) -> Dict[str, Any]:
        """Cancel every pending field invite of a document.

        An empty ``token`` raises ``ValueError`` before any request is sent.
        """
        return await self._call(RequestIntent(
            method="PUT",
            path=document_path(document_id, "/fieldinvitecancel"),
            authorization=Authorization.bearer(token),
        ))

    async def remove_document(self, document_id: str, token: str, cancel_invites: bool = False) -> Dict[str, Any]:
        """Delete a document, optionally cancelling its invites first.

        A failed invite cancellation aborts the removal. An empty ``token``
        raises ``ValueError`` (pydantic ``ValidationError``) before any request
        is sent.
        """
        if cancel_invites:
            self.logger.info(f"Cancelling invites of document {document_id}")
            await self.cancel_invites(document_id, token)

        self.logger.info(f"Removing document {document_id}")
        return await self._call(RequestIntent(
            method="DELETE",
            path=document_path(document_id),
            authorization=Authorization.bearer(token),
        ))
