"""Resource services; each wraps one family of Relay API endpoints."""

from ._paths import PathBuilder
from .api_keys import APIKeyService
from .channels import ChannelService
from .credentials import CredentialService
from .invitations import InvitationService
from .tools import ToolService
from .webhooks import WebhookService
from .workflows import WorkflowService

__all__ = [
    "PathBuilder",
    "WorkflowService",
    "ToolService",
    "CredentialService",
    "ChannelService",
    "APIKeyService",
    "InvitationService",
    "WebhookService",
]
