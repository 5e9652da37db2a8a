from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core.http import HTTPClient
from ..models import Payload, to_payload
from ._paths import PathBuilder


class CredentialService:
    """
    Stored secrets (API keys, OAuth2 tokens, database logins, ...) for a tenant.
    Only get_decrypted returns secret material; every other call returns summaries.
    """

    base_path = "/credentials"

    def __init__(self, http: HTTPClient, tenant_id: str):
        self.http = http
        self.paths = PathBuilder(tenant_id, self.base_path)

    async def create(self, request: Payload) -> Dict[str, Any]:
        return await self.http.post(self.paths.tenant(""), to_payload(request))

    async def list(self, params: Optional[Payload] = None) -> Dict[str, Any]:
        """Params: page, page_size, type, is_active, search, tags (repeated key)."""
        return await self.http.get(self.paths.tenant(""), to_payload(params))

    async def get(self, credential_id: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/{credential_id}"))

    async def get_decrypted(
        self, credential_id: str, auto_refresh: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Fetch decrypted data; auto_refresh renews an expired OAuth2 token first."""
        query = {"auto_refresh": auto_refresh} if auto_refresh is not None else None
        return await self.http.get(
            self.paths.tenant(f"/{credential_id}/decrypted"), query
        )

    async def update(self, credential_id: str, request: Payload) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant(f"/{credential_id}"), to_payload(request)
        )

    async def delete(self, credential_id: str) -> Dict[str, Any]:
        return await self.http.delete(self.paths.tenant(f"/{credential_id}"))

    async def activate(self, credential_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{credential_id}/activate"))

    async def deactivate(self, credential_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{credential_id}/deactivate"))

    async def share(self, credential_id: str, request: Payload) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant(f"/{credential_id}/share"), to_payload(request)
        )

    async def test(
        self, credential_id: str, test_type: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.http.post(
            self.paths.tenant(f"/{credential_id}/test"),
            None,
            query={"test_type": test_type} if test_type else None,
        )

    async def refresh(self, credential_id: str) -> Dict[str, Any]:
        """Exchange the stored OAuth2 refresh token for a new access token."""
        return await self.http.post(self.paths.tenant(f"/{credential_id}/refresh"))

    async def get_credential_types(self) -> List[Dict[str, Any]]:
        return await self.http.get(self.paths.absolute("/api/credentials/types"))


__all__ = ["CredentialService"]
