from __future__ import annotations

from typing import Any, Dict

from ..core.http import HTTPClient
from ._paths import PathBuilder


class WebhookService:
    base_path = "/webhooks/wait"

    def __init__(self, http: HTTPClient, tenant_id: str):
        self.http = http
        self.paths = PathBuilder(tenant_id, self.base_path)

    async def list_wait_instances(self) -> Dict[str, Any]:
        """Webhook wait instances created by WEBHOOK_WAIT nodes, triggered or not."""
        return await self.http.get(self.paths.tenant(""))


__all__ = ["WebhookService"]
