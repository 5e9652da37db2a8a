from __future__ import annotations

import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import httpx
from dotenv import load_dotenv

from .errors import RelayError

DEFAULT_BASE_URL = "https://api.relay.com"
DEFAULT_TIMEOUT_MS = 30000
USER_AGENT = "relay-api-client-python/1.0.0"

RequestHook = Callable[[str, Dict[str, Any]], Union[None, Awaitable[None]]]
ResponseHook = Callable[[httpx.Response], Union[None, Awaitable[None]]]
ErrorHook = Callable[[RelayError], Union[None, Awaitable[None]]]


def merge_headers(*layers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Merge header mappings left to right; later layers win, names compared case-insensitively."""
    merged: Dict[str, str] = {}
    seen: Dict[str, str] = {}
    for layer in layers:
        for name, value in (layer or {}).items():
            previous = seen.get(name.lower())
            if previous is not None:
                merged.pop(previous, None)
            seen[name.lower()] = name
            merged[name] = value
    return merged


@dataclass(frozen=True)
class ClientConfig:
    """Immutable transport settings held for the lifetime of an HTTPClient."""

    base_url: str
    api_key: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    headers: Mapping[str, str] = field(default_factory=dict)
    on_request: Optional[RequestHook] = None
    on_response: Optional[ResponseHook] = None
    on_error: Optional[ErrorHook] = None

    @classmethod
    def build(
        cls,
        *,
        base_url: str,
        api_key: str,
        timeout_ms: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
        on_request: Optional[RequestHook] = None,
        on_response: Optional[ResponseHook] = None,
        on_error: Optional[ErrorHook] = None,
    ) -> "ClientConfig":
        # Exactly one trailing slash is dropped.
        if base_url.endswith("/"):
            base_url = base_url[:-1]

        default_headers = merge_headers(
            {"Content-Type": "application/json", "User-Agent": USER_AGENT},
            headers,
        )
        return cls(
            base_url=base_url,
            api_key=api_key,
            timeout_ms=DEFAULT_TIMEOUT_MS if timeout_ms is None else timeout_ms,
            headers=MappingProxyType(default_headers),
            on_request=on_request,
            on_response=on_response,
            on_error=on_error,
        )


def load_env_config(*, use_dotenv: bool = True) -> Dict[str, Any]:
    """Read RELAY_* settings from the environment (optionally via .env)."""
    if use_dotenv:
        load_dotenv()
    settings: Dict[str, Any] = {
        "api_key": os.getenv("RELAY_API_KEY", "").strip(),
        "tenant_id": os.getenv("RELAY_TENANT_ID", "").strip(),
    }
    base_url = os.getenv("RELAY_BASE_URL", "").strip()
    if base_url:
        settings["base_url"] = base_url
    timeout = os.getenv("RELAY_TIMEOUT_MS", "").strip()
    if timeout:
        try:
            settings["timeout_ms"] = int(timeout)
        except ValueError as exc:
            raise ValueError(
                f"RELAY_TIMEOUT_MS must be an integer, got {timeout!r}"
            ) from exc
    return settings


__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "USER_AGENT",
    "RequestHook",
    "ResponseHook",
    "ErrorHook",
    "load_env_config",
    "merge_headers",
]
