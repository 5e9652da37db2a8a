from __future__ import annotations

from typing import Any, Dict, List

from ..core.http import HTTPClient
from ..models import ChannelType, Payload, to_payload
from ._paths import PathBuilder, enum_value, quote_segment


class ChannelService:
    """Messaging channels (WhatsApp, Instagram, Telegram, ...) for one tenant."""

    base_path = "/channels"

    def __init__(self, http: HTTPClient, tenant_id: str):
        self.http = http
        self.paths = PathBuilder(tenant_id, self.base_path)

    async def create(self, request: Payload) -> Dict[str, Any]:
        return await self.http.post(self.paths.tenant(""), to_payload(request))

    async def list(self) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(""))

    async def list_active(self) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant("/active"))

    async def list_by_type(self, channel_type: ChannelType | str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/type/{enum_value(channel_type)}"))

    async def get(self, channel_id: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/{channel_id}"))

    async def get_by_name(self, name: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/name/{quote_segment(name)}"))

    async def get_features(self, channel_id: str) -> Dict[str, Any]:
        return await self.http.get(self.paths.tenant(f"/{channel_id}/features"))

    async def update(self, channel_id: str, request: Payload) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant(f"/{channel_id}"), to_payload(request)
        )

    async def delete(self, channel_id: str) -> Dict[str, Any]:
        return await self.http.delete(self.paths.tenant(f"/{channel_id}"))

    async def activate(self, channel_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{channel_id}/activate"))

    async def deactivate(self, channel_id: str) -> Dict[str, Any]:
        return await self.http.put(self.paths.tenant(f"/{channel_id}/deactivate"))

    async def send_message(self, channel_id: str, request: Payload) -> Dict[str, Any]:
        return await self.http.post(
            self.paths.tenant(f"/{channel_id}/send"), to_payload(request)
        )

    async def test(self, channel_id: str) -> Dict[str, Any]:
        return await self.http.post(self.paths.tenant(f"/{channel_id}/test"))

    async def bulk_activate(self, channel_ids: List[str]) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant("/bulk/activate"), {"channel_ids": list(channel_ids)}
        )

    async def bulk_deactivate(self, channel_ids: List[str]) -> Dict[str, Any]:
        return await self.http.put(
            self.paths.tenant("/bulk/deactivate"), {"channel_ids": list(channel_ids)}
        )

    async def get_channel_types(self) -> List[Dict[str, Any]]:
        return await self.http.get(self.paths.absolute("/api/channels/types"))

    async def validate_config(self, request: Payload) -> Dict[str, Any]:
        """Check a channel config without creating it; returns is_valid and errors."""
        return await self.http.post(
            self.paths.absolute("/api/channels/validate"), to_payload(request)
        )


__all__ = ["ChannelService"]
