from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .core.config import (
    DEFAULT_BASE_URL,
    ErrorHook,
    RequestHook,
    ResponseHook,
    load_env_config,
)
from .core.http import HTTPClient
from .core.observability import log_event
from .services import (
    APIKeyService,
    ChannelService,
    CredentialService,
    InvitationService,
    ToolService,
    WebhookService,
    WorkflowService,
)


class RelayClient:
    """
    Entry point for the Relay API.
    - Validates credentials up front, then builds one shared HTTPClient
    - Exposes one service per resource family (workflows, tools, ...)
    - All calls are scoped to the tenant given at construction

        async with RelayClient(api_key="relay_live_...", tenant_id="tenant-123") as relay:
            page = await relay.workflows.list({"page": 1, "is_active": True})
    """

    def __init__(
        self,
        *,
        api_key: str,
        tenant_id: str,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
        on_request: Optional[RequestHook] = None,
        on_response: Optional[ResponseHook] = None,
        on_error: Optional[ErrorHook] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        if not api_key:
            raise ValueError("API key is required")
        if not tenant_id:
            raise ValueError("Tenant ID is required")

        self._tenant_id = tenant_id
        self._http = HTTPClient(
            base_url=base_url or DEFAULT_BASE_URL,
            api_key=api_key,
            timeout_ms=timeout_ms,
            headers=headers,
            on_request=on_request,
            on_response=on_response,
            on_error=on_error,
            logger=logger,
            http=http,
        )

        self.workflows = WorkflowService(self._http, tenant_id)
        self.tools = ToolService(self._http, tenant_id)
        self.credentials = CredentialService(self._http, tenant_id)
        self.channels = ChannelService(self._http, tenant_id)
        self.api_keys = APIKeyService(self._http, tenant_id)
        self.invitations = InvitationService(self._http, tenant_id)
        self.webhooks = WebhookService(self._http, tenant_id)

        log_event(
            "relay_client.created",
            tenant_id=tenant_id,
            url=self._http.base_url,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "RelayClient":
        """Build from RELAY_API_KEY / RELAY_TENANT_ID / RELAY_BASE_URL / RELAY_TIMEOUT_MS."""
        settings = load_env_config()
        settings.update(kwargs)
        return cls(**settings)

    @property
    def tenant_id(self) -> str:
        return self._tenant_id

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def http(self) -> HTTPClient:
        return self._http

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "RelayClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["RelayClient"]
