"""relay_client package exports."""

from .client import RelayClient
from .core import (
    ClientConfig,
    ErrorKind,
    HTTPClient,
    RelayError,
    append_query_params,
    build_query_string,
    load_env_config,
    setup_logging,
)
from .services import (
    APIKeyService,
    ChannelService,
    CredentialService,
    InvitationService,
    PathBuilder,
    ToolService,
    WebhookService,
    WorkflowService,
)

__version__ = "1.0.0"

__all__ = [
    # Client
    "RelayClient",
    "HTTPClient",
    "ClientConfig",
    # Exceptions
    "RelayError",
    "ErrorKind",
    # Services
    "WorkflowService",
    "ToolService",
    "CredentialService",
    "ChannelService",
    "APIKeyService",
    "InvitationService",
    "WebhookService",
    "PathBuilder",
    # Utilities
    "build_query_string",
    "append_query_params",
    "load_env_config",
    "setup_logging",
]
