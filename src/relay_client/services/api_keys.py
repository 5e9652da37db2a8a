from __future__ import annotations

from typing import Any, Dict

from ..core.http import HTTPClient
from ..models import Payload, to_payload
from ._paths import PathBuilder


class APIKeyService:
    """
    API keys live off the API root, not under the tenant prefix.
    The secret is only returned once, by create().
    """

    base_path = "/api-keys"

    def __init__(self, http: HTTPClient, tenant_id: str):
        self.http = http
        self.paths = PathBuilder(tenant_id, self.base_path)

    def _key_path(self, path: str = "") -> str:
        return self.paths.absolute(f"{self.base_path}{path}")

    async def create(self, request: Payload) -> Dict[str, Any]:
        return await self.http.post(self._key_path(), to_payload(request))

    async def list(self) -> Dict[str, Any]:
        return await self.http.get(self._key_path())

    async def get(self, key_id: str) -> Dict[str, Any]:
        return await self.http.get(self._key_path(f"/{key_id}"))

    async def update(self, key_id: str, request: Payload) -> Dict[str, Any]:
        return await self.http.put(self._key_path(f"/{key_id}"), to_payload(request))

    async def revoke(self, key_id: str) -> Dict[str, Any]:
        return await self.http.post(self._key_path(f"/{key_id}/revoke"))

    async def delete(self, key_id: str) -> Dict[str, Any]:
        return await self.http.delete(self._key_path(f"/{key_id}"))


__all__ = ["APIKeyService"]
