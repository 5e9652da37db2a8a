from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# --- Enums ----------------------------------------------------------------- #


class ChannelType(str, Enum):
    WHATSAPP = "WHATSAPP"
    INSTAGRAM = "INSTAGRAM"
    TELEGRAM = "TELEGRAM"
    INFOBIP = "INFOBIP"
    EMAIL = "EMAIL"
    SMS = "SMS"
    WEBCHAT = "WEBCHAT"
    VOICE = "VOICE"
    TEST_HTTP = "TEST_HTTP"


class CredentialType(str, Enum):
    API_KEY = "API_KEY"
    OAUTH2 = "OAUTH2"
    BASIC_AUTH = "BASIC_AUTH"
    BEARER_TOKEN = "BEARER_TOKEN"
    DATABASE = "DATABASE"
    SMTP = "SMTP"
    AWS = "AWS"
    CUSTOM = "CUSTOM"


class ToolType(str, Enum):
    HTTP = "HTTP"
    INTERNAL = "INTERNAL"
    GOOGLE_CALENDAR = "GOOGLE_CALENDAR"
    SLACK = "SLACK"
    DATABASE = "DATABASE"
    CALENDLY = "CALENDLY"
    WORKFLOW_TRIGGER = "WORKFLOW_TRIGGER"


class TriggerType(str, Enum):
    WEBHOOK = "WEBHOOK"
    SCHEDULE = "SCHEDULE"
    MANUAL = "MANUAL"
    CHANNEL_WEBHOOK = "CHANNEL_WEBHOOK"
    TOOL_CALL = "TOOL_CALL"


class NodeType(str, Enum):
    CONDITION = "CONDITION"
    SWITCH = "SWITCH"
    LOOP = "LOOP"
    MERGE = "MERGE"
    ACTION = "ACTION"
    TRANSFORM = "TRANSFORM"
    HTTP = "HTTP"
    HTTP_RESPONSE = "HTTP_RESPONSE"
    FILTER = "FILTER"
    VALIDATE = "VALIDATE"
    SET_CONTEXT = "SET_CONTEXT"
    BUFFER = "BUFFER"
    DELAY = "DELAY"
    WEBHOOK_WAIT = "WEBHOOK_WAIT"
    AI_AGENT = "AI_AGENT"
    SEND_MESSAGE = "SEND_MESSAGE"
    EMAIL = "EMAIL"
    SQL = "SQL"
    CLOUD_STORAGE = "CLOUD_STORAGE"
    HUBSPOT = "HUBSPOT"
    VIDEO_GENERATION = "VIDEO_GENERATION"
    SPEECH_TO_TEXT = "SPEECH_TO_TEXT"
    TEXT_TO_SPEECH = "TEXT_TO_SPEECH"
    ERROR_HANDLER = "ERROR_HANDLER"
    SUB_WORKFLOW = "SUB_WORKFLOW"


class ExecutionMode(str, Enum):
    SYNC = "SYNC"
    ASYNC = "ASYNC"


class ExecutionStatus(str, Enum):
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    TIMEOUT = "TIMEOUT"
    CANCELED = "CANCELED"


class InvitationStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    EXPIRED = "EXPIRED"
    REVOKED = "REVOKED"


class Environment(str, Enum):
    LIVE = "live"
    TEST = "test"


# --- Base ------------------------------------------------------------------ #


class RelayModel(BaseModel):
    """
    Base for request bodies and query params.
    Unknown fields are passed through so new API options don't need a release.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


Payload = Union[RelayModel, BaseModel, Mapping[str, Any]]


def to_payload(obj: Optional[Payload]) -> Optional[Dict[str, Any]]:
    """Turn a model or mapping into a plain JSON-ready dict (None fields dropped)."""
    if obj is None:
        return None
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True, by_alias=True)
    return dict(obj)


# --- Query params ---------------------------------------------------------- #


class PaginationParams(RelayModel):
    page: Optional[int] = Field(default=None, ge=1)
    page_size: Optional[int] = Field(default=None, ge=1)


class ListWorkflowsParams(PaginationParams):
    is_active: Optional[bool] = None
    search: Optional[str] = None


class ListToolsParams(PaginationParams):
    type: Optional[ToolType] = None
    is_active: Optional[bool] = None
    search: Optional[str] = None


class ListCredentialsParams(PaginationParams):
    type: Optional[CredentialType] = None
    is_active: Optional[bool] = None
    search: Optional[str] = None
    tags: Optional[List[str]] = None


# --- Workflows ------------------------------------------------------------- #


class WorkflowTrigger(RelayModel):
    type: TriggerType
    config: Optional[Dict[str, Any]] = None
    filters: Optional[Dict[str, Any]] = None


class WorkflowNode(RelayModel):
    id: str
    name: str
    alias: Optional[str] = None
    type: NodeType
    config: Dict[str, Any] = Field(default_factory=dict)
    on_success: Optional[List[str]] = None
    on_failure: Optional[List[str]] = None
    timeout: Optional[int] = None  # milliseconds


class CreateWorkflowRequest(RelayModel):
    name: str
    description: str = ""
    trigger: WorkflowTrigger
    nodes: List[WorkflowNode] = Field(default_factory=list)


class UpdateWorkflowRequest(RelayModel):
    name: Optional[str] = None
    description: Optional[str] = None
    trigger: Optional[WorkflowTrigger] = None
    nodes: Optional[List[WorkflowNode]] = None


class ExecuteWorkflowRequest(RelayModel):
    mode: Optional[ExecutionMode] = None
    input: Optional[Dict[str, Any]] = None
    context: Optional[Dict[str, Any]] = None
    wait: Optional[bool] = None


class ValidateWorkflowRequest(RelayModel):
    trigger: WorkflowTrigger
    nodes: List[WorkflowNode] = Field(default_factory=list)


# --- Tools ----------------------------------------------------------------- #


class CreateToolRequest(RelayModel):
    name: str
    description: str = ""
    type: ToolType
    config: Dict[str, Any] = Field(default_factory=dict)
    parameters: List[Dict[str, Any]] = Field(default_factory=list)


class UpdateToolRequest(RelayModel):
    name: Optional[str] = None
    description: Optional[str] = None
    config: Optional[Dict[str, Any]] = None
    parameters: Optional[List[Dict[str, Any]]] = None


class TestToolRequest(RelayModel):
    parameters: Dict[str, Any] = Field(default_factory=dict)
    context: Optional[Dict[str, Any]] = None


# --- Credentials ----------------------------------------------------------- #


class CreateCredentialRequest(RelayModel):
    name: str
    description: str = ""
    type: CredentialType
    data: Dict[str, Any]
    metadata: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    is_shared: Optional[bool] = None


class UpdateCredentialRequest(RelayModel):
    name: Optional[str] = None
    description: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None


class ShareCredentialRequest(RelayModel):
    is_shared: bool
    user_ids: Optional[List[str]] = None
    role_ids: Optional[List[str]] = None


# --- Channels -------------------------------------------------------------- #


class CreateChannelRequest(RelayModel):
    type: ChannelType
    name: str
    description: str = ""
    config: Dict[str, Any] = Field(default_factory=dict)


class UpdateChannelRequest(RelayModel):
    name: Optional[str] = None
    description: Optional[str] = None
    config: Optional[Dict[str, Any]] = None


class SendMessageRequest(RelayModel):
    recipient_id: str
    content: Dict[str, Any]
    attachments: Optional[List[Dict[str, Any]]] = None
    metadata: Optional[Dict[str, Any]] = None
    reply_to_id: Optional[str] = None
    template_id: Optional[str] = None
    variables: Optional[Dict[str, str]] = None


# --- API keys & invitations ------------------------------------------------ #


class CreateAPIKeyRequest(RelayModel):
    name: str
    description: Optional[str] = None
    scopes: List[str]
    expires_in: Optional[int] = None
    environment: Environment
    user_id: Optional[str] = None


class UpdateAPIKeyRequest(RelayModel):
    name: Optional[str] = None
    description: Optional[str] = None
    scopes: Optional[List[str]] = None
    expires_at: Optional[str] = None


class CreateInvitationRequest(RelayModel):
    email: str
    role_id: Optional[str] = None
    expires_in_days: Optional[int] = None
    message: Optional[str] = None


__all__ = [
    "ChannelType",
    "CredentialType",
    "ToolType",
    "TriggerType",
    "NodeType",
    "ExecutionMode",
    "ExecutionStatus",
    "InvitationStatus",
    "Environment",
    "RelayModel",
    "Payload",
    "to_payload",
    "PaginationParams",
    "ListWorkflowsParams",
    "ListToolsParams",
    "ListCredentialsParams",
    "WorkflowTrigger",
    "WorkflowNode",
    "CreateWorkflowRequest",
    "UpdateWorkflowRequest",
    "ExecuteWorkflowRequest",
    "ValidateWorkflowRequest",
    "CreateToolRequest",
    "UpdateToolRequest",
    "TestToolRequest",
    "CreateCredentialRequest",
    "UpdateCredentialRequest",
    "ShareCredentialRequest",
    "CreateChannelRequest",
    "UpdateChannelRequest",
    "SendMessageRequest",
    "CreateAPIKeyRequest",
    "UpdateAPIKeyRequest",
    "CreateInvitationRequest",
]
