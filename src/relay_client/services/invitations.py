from __future__ import annotations

from typing import Any, Dict

from ..core.http import HTTPClient
from ..models import Payload, to_payload
from ._paths import PathBuilder


class InvitationService:
    base_path = "/invitations"

    def __init__(self, http: HTTPClient, tenant_id: str):
        self.http = http
        self.paths = PathBuilder(tenant_id, self.base_path)

    def _invitation_path(self, path: str = "") -> str:
        return self.paths.absolute(f"{self.base_path}{path}")

    async def create(self, request: Payload) -> Dict[str, Any]:
        return await self.http.post(self._invitation_path(), to_payload(request))

    async def list(self) -> Dict[str, Any]:
        return await self.http.get(self._invitation_path())

    async def list_pending(self) -> Dict[str, Any]:
        return await self.http.get(self._invitation_path("/pending"))

    async def get(self, invitation_id: str) -> Dict[str, Any]:
        return await self.http.get(self._invitation_path(f"/{invitation_id}"))

    async def delete(self, invitation_id: str) -> Dict[str, Any]:
        return await self.http.delete(self._invitation_path(f"/{invitation_id}"))

    async def revoke(self, invitation_id: str) -> Dict[str, Any]:
        return await self.http.post(self._invitation_path(f"/{invitation_id}/revoke"))

    # Public endpoints used by invitees before they have an account.

    async def validate_token(self, token: str) -> Dict[str, Any]:
        return await self.http.get(
            self._invitation_path("/public/validate"), {"token": token}
        )

    async def get_by_token(self, token: str) -> Dict[str, Any]:
        return await self.http.get(self._invitation_path(f"/public/token/{token}"))


__all__ = ["InvitationService"]
