from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, RequestModel

REQUEST_TYPES = ("GET", "POST")


class Webhook(CrowdinModel):
    id: int = 0
    project_id: int = Field(default=0, alias="projectId")
    name: str = ""
    url: str = ""
    events: List[str] = Field(default_factory=list)
    headers: Dict[str, str] = Field(default_factory=dict)
    payload: JSONValue = None
    is_active: bool = Field(default=False, alias="isActive")
    batching_enabled: bool = Field(default=False, alias="batchingEnabled")
    request_type: str = Field(default="", alias="requestType")
    content_type: str = Field(default="", alias="contentType")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")

    @field_validator("headers", mode="before")
    @classmethod
    def empty_list_as_empty_map(cls, v: Any) -> Any:
        # webhooks without headers come back with `"headers": []`
        if v is None or isinstance(v, list):
            return {}
        return v


class WebhookAddRequest(RequestModel):
    """`events` are names such as "file.added" or "project.built"."""
    name: str = ""
    url: str = ""
    events: List[str] = Field(default_factory=list)
    request_type: str = Field(default="", alias="requestType")
    is_active: Optional[bool] = Field(default=None, alias="isActive")
    batching_enabled: Optional[bool] = Field(default=None, alias="batchingEnabled")
    content_type: Optional[str] = Field(default=None, alias="contentType")
    headers: Optional[Dict[str, str]] = None
    payload: JSONValue = None

    def validate_request(self) -> None:
        self.require(self.name, "name is required")
        self.require(self.url, "url is required")
        self.require(self.events, "events is required")
        self.require(self.request_type, "requestType is required")
        self.require(self.request_type in REQUEST_TYPES, "requestType must be GET or POST")
