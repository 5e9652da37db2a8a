from __future__ import annotations

import inspect
import json
import logging
import time
from typing import Any, Dict, Mapping, Optional

import anyio
import httpx
from pydantic import BaseModel

from ..models import to_payload
from .config import (
    DEFAULT_TIMEOUT_MS,
    ClientConfig,
    ErrorHook,
    RequestHook,
    ResponseHook,
    merge_headers,
)
from .errors import RelayError
from .observability import log_exchange, log_failure
from .query import append_query_params

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


async def _maybe_await(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


def _serialize_body(body: Any) -> str:
    if isinstance(body, str):
        return body
    if isinstance(body, BaseModel):
        body = to_payload(body)
    return json.dumps(body)


class HTTPClient:
    """
    Transport core shared by every Relay resource service.
    - Injects bearer auth and default headers on every call
    - Races each exchange against a timeout
    - Maps every failure to exactly one RelayError
    - Runs optional request/response/error hooks in order, awaiting each
    No retries: callers decide what to do with err.kind / err.retry_after.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout_ms: Optional[int] = DEFAULT_TIMEOUT_MS,
        headers: Optional[Mapping[str, str]] = None,
        on_request: Optional[RequestHook] = None,
        on_response: Optional[ResponseHook] = None,
        on_error: Optional[ErrorHook] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.config = ClientConfig.build(
            base_url=base_url,
            api_key=api_key,
            timeout_ms=timeout_ms,
            headers=headers,
            on_request=on_request,
            on_response=on_response,
            on_error=on_error,
        )
        self.log = logger or logging.getLogger("relay_client.http")

        # Deadlines are enforced per call below, not by httpx. Redirects are
        # followed so a 3xx never surfaces as an error.
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(timeout=None, follow_redirects=True)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "HTTPClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
        timeout_ms: Optional[int] = None,
        credentials: str = "same-origin",
    ) -> Any:
        """
        Core request method.
        - Returns the parsed body unchanged on 2xx
        - Raises RelayError (classified by status/transport failure) otherwise
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        timeout_ms = self.config.timeout_ms if timeout_ms is None else timeout_ms

        url = f"{self.config.base_url}{path}"
        if query:
            url = append_query_params(url, query)

        # Authorization goes last so neither default nor per-call headers can replace it.
        request_headers = merge_headers(
            self.config.headers,
            headers,
            {"Authorization": f"Bearer {self.config.api_key}"},
        )

        options: Dict[str, Any] = {
            "method": method,
            "headers": request_headers,
            "credentials": credentials,
        }
        if body is not None and method != "GET":
            options["body"] = _serialize_body(body)

        start = time.perf_counter()
        try:
            return await self._exchange(url, options, timeout_ms)
        except RelayError as exc:
            error = exc
        except Exception as exc:
            error = RelayError.unknown(
                str(exc) or None, details={"original_error": repr(exc)}
            )
            error.__cause__ = exc

        log_failure(self.log, method, url, error, start)
        if self.config.on_error is not None:
            await _maybe_await(self.config.on_error(error))
        raise error

    async def _exchange(
        self, url: str, options: Dict[str, Any], timeout_ms: int
    ) -> Any:
        if self.config.on_request is not None:
            await _maybe_await(self.config.on_request(url, options))

        start = time.perf_counter()
        try:
            with anyio.fail_after(timeout_ms / 1000):
                resp = await self.http.request(
                    options["method"],
                    url,
                    headers=options["headers"],
                    content=options.get("body"),
                )
        except TimeoutError as exc:
            raise RelayError.timeout(f"Request timeout after {timeout_ms}ms") from exc
        except httpx.HTTPError as exc:
            raise RelayError.network(details={"original_error": str(exc)}) from exc

        log_exchange(self.log, options["method"], url, resp.status_code, start)

        if self.config.on_response is not None:
            await _maybe_await(self.config.on_response(resp))

        data = self._parse_body(resp)
        if not resp.is_success:
            raise RelayError.from_response(
                resp.status_code,
                data,
                retry_after_header=resp.headers.get("retry-after"),
            )
        return data

    @staticmethod
    def _parse_body(resp: httpx.Response) -> Any:
        # Unparseable bodies never surface as their own error.
        content_type = resp.headers.get("content-type", "")
        try:
            if "application/json" in content_type:
                return resp.json()
            text = resp.text
        except (ValueError, UnicodeDecodeError):
            return {}
        return {"message": text} if text else {}

    async def get(
        self,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        **options: Any,
    ) -> Any:
        return await self.request(path, method="GET", query=query, **options)

    async def post(self, path: str, body: Any = None, **options: Any) -> Any:
        return await self.request(path, method="POST", body=body, **options)

    async def put(self, path: str, body: Any = None, **options: Any) -> Any:
        return await self.request(path, method="PUT", body=body, **options)

    async def patch(self, path: str, body: Any = None, **options: Any) -> Any:
        return await self.request(path, method="PATCH", body=body, **options)

    async def delete(self, path: str, **options: Any) -> Any:
        return await self.request(path, method="DELETE", **options)


__all__ = ["HTTPClient", "HTTP_METHODS"]
