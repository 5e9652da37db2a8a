from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core.http import HTTPClient
from ..models import NodeType, Payload, to_payload
from ._paths import PathBuilder, enum_value, quote_segment


class WorkflowService:
    """Create, update, run and inspect workflows for one tenant."""

    base_path = "/workflows"

    def __init__(self, http: HTTPClient, tenant_id: str):
        self.http = http
        self.paths = PathBuilder(tenant_id, self.base_path)

    async def create(self, request: Payload) -> Dict[str, Any]:
        return await self.http.post(self.paths.tenant(""), to_payload(request))

    async def list(self, params: Optional[Payload] = None) -> Dict[str, Any]:
        """Paginated list; params: page, page_size, is_active, search."""
        return await self.http.get(self.paths.tenant(""), to_payload(params))

    async def get(self, workflow_id: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/{workflow_id}"))

    async def get_by_name(self, name: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/name/{quote_segment(name)}"))

    async def update(self, workflow_id: str, request: Payload) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant(f"/{workflow_id}"), to_payload(request)
        )

    async def delete(self, workflow_id: str) -> Dict[str, Any]:
        return await self.http.delete(self.paths.tenant(f"/{workflow_id}"))

    async def activate(self, workflow_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{workflow_id}/activate"))

    async def deactivate(self, workflow_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{workflow_id}/deactivate"))

    async def execute(
        self, workflow_id: str, request: Optional[Payload] = None
    ) -> Dict[str, Any]:
        return await self.http.post(
            self.paths.tenant(f"/{workflow_id}/execute"), to_payload(request)
        )

    async def test(self, request: Payload) -> Dict[str, Any]:
        """Run a workflow definition without saving it."""
        return await self.http.post(self.paths.tenant("/test"), to_payload(request))

    async def validate(self, request: Payload) -> Dict[str, Any]:
        return await self.http.post(
            self.paths.absolute("/api/workflows/validate"), to_payload(request)
        )

    async def bulk_activate(self, workflow_ids: List[str]) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant("/bulk/activate"), {"workflow_ids": list(workflow_ids)}
        )

    async def bulk_deactivate(self, workflow_ids: List[str]) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant("/bulk/deactivate"),
            {"workflow_ids": list(workflow_ids)},
        )

    async def get_node_types(self) -> List[Dict[str, Any]]:
        return await self.http.get(self.paths.absolute("/api/nodes/types"))

    async def get_node_type_schema(self, node_type: NodeType | str) -> Dict[str, Any]:
        return await self.http.get(
            self.paths.absolute(f"/api/nodes/types/{enum_value(node_type)}/schema")
        )

    async def get_trigger_types(self) -> List[Dict[str, Any]]:
        return await self.http.get(self.paths.absolute("/api/triggers/types"))


__all__ = ["WorkflowService"]
