from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core.http import HTTPClient
from ..models import Payload, ToolType, to_payload
from ._paths import PathBuilder, enum_value


class ToolService:
    base_path = "/tools"

    def __init__(self, http: HTTPClient, tenant_id: str):
        self.http = http
        self.paths = PathBuilder(tenant_id, self.base_path)

    async def create(self, request: Payload) -> Dict[str, Any]:
        return await self.http.post(self.paths.tenant(""), to_payload(request))

    async def list(self, params: Optional[Payload] = None) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(""), to_payload(params))

    async def get(self, tool_id: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/{tool_id}"))

    async def get_parameters(self, tool_id: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/{tool_id}/parameters"))

    async def update(self, tool_id: str, request: Payload) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{tool_id}"), to_payload(request))

    async def delete(self, tool_id: str) -> Dict[str, Any]:
        return await self.http.delete(self.paths.tenant(f"/{tool_id}"))

    async def activate(self, tool_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{tool_id}/activate"))

    async def deactivate(self, tool_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{tool_id}/deactivate"))

    async def test(self, tool_id: str, request: Payload) -> Dict[str, Any]:
        """Invoke a tool with sample parameters/context; result carries success/output/error."""
        return await self.http.post(
            self.paths.tenant(f"/{tool_id}/test"), to_payload(request)
        )

    async def get_tool_types(self) -> List[Dict[str, Any]]:
        return await self.http.get(self.paths.absolute("/api/tools/types"))

    async def get_tool_type_schema(self, tool_type: ToolType | str) -> Dict[str, Any]:
        return await self.http.get(
            self.paths.absolute(f"/api/tools/types/{enum_value(tool_type)}/schema")
        )


__all__ = ["ToolService"]
