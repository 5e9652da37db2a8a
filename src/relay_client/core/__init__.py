"""Transport core for relay-client (independent of the resource services)."""

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    USER_AGENT,
    ClientConfig,
    load_env_config,
)
from .errors import ErrorKind, RelayError
from .http import HTTPClient
from .logging import LogfmtFormatter, setup_logging
from .observability import log_event, log_exchange, log_failure
from .query import append_query_params, build_query_string

__all__ = [
    # Transport
    "HTTPClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "USER_AGENT",
    # Errors
    "ErrorKind",
    "RelayError",
    # Query helpers
    "build_query_string",
    "append_query_params",
    # Config / logging
    "load_env_config",
    "setup_logging",
    "LogfmtFormatter",
    "log_event",
    "log_exchange",
    "log_failure",
]
