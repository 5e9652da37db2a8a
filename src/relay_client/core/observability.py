from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .errors import RelayError

# Every attribute a bare LogRecord carries, plus the two the Formatter adds.
RESERVED_LOG_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def elapsed_ms(start: float) -> int:
    """Milliseconds since a time.perf_counter() reading."""
    return int((time.perf_counter() - start) * 1000)


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """
    Structured logging helper for relay_client events.
    - Fields ride on the record as attributes so LogfmtFormatter can emit them
    - Keys that would clobber LogRecord attributes are dropped
    """
    log = logger or logging.getLogger("relay_client.observability")
    if not log.isEnabledFor(level):
        return
    log.log(level, event, extra={"event": event, **_clean_fields(fields)})


def log_exchange(
    logger: logging.Logger, method: str, url: str, status: int, start: float
) -> None:
    log_event(
        "relay.request",
        logger,
        level=logging.DEBUG,
        method=method,
        url=url,
        status=status,
        duration_ms=elapsed_ms(start),
    )


def log_failure(
    logger: logging.Logger, method: str, url: str, error: "RelayError", start: float
) -> None:
    log_event(
        "relay.error",
        logger,
        level=logging.DEBUG,
        method=method,
        url=url,
        status=error.status,
        kind=error.kind.value,
        code=error.code,
        duration_ms=elapsed_ms(start),
    )


__all__ = ["log_event", "log_exchange", "log_failure", "elapsed_ms"]
