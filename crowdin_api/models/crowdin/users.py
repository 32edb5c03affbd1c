from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, OrderedListOptions, RequestModel


class Role(str, Enum):
    TRANSLATOR = "translator"
    PROOFREADER = "proofreader"
    LANGUAGE_COORDINATOR = "language_coordinator"


class LanguageAccess(CrowdinModel):
    all_content: Optional[bool] = Field(default=None, alias="allContent")
    workflow_step_ids: Optional[List[int]] = Field(default=None, alias="workflowStepIds")


class RolePermissions(CrowdinModel):
    all_languages: Optional[bool] = Field(default=None, alias="allLanguages")
    languages_access: Dict[str, Optional[LanguageAccess]] = Field(default_factory=dict, alias="languagesAccess")

    @field_validator("languages_access", mode="before")
    @classmethod
    def empty_list_as_empty_map(cls, v: Any) -> Any:
        # the API sends [] instead of {} when no language is configured
        if v is None or v == []:
            return {}
        return v


class TranslatorRole(CrowdinModel):
    name: Optional[Role] = None
    permissions: Optional[RolePermissions] = None


class User(CrowdinModel):
    """Organization user. `fields` holds custom field values and may be an
    object, an empty array or null depending on server state."""
    id: int = 0
    username: str = ""
    email: str = ""
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    full_name: Optional[str] = Field(default=None, alias="fullName")
    status: Optional[str] = None
    avatar_url: str = Field(default="", alias="avatarUrl")
    created_at: str = Field(default="", alias="createdAt")
    last_seen: str = Field(default="", alias="lastSeen")
    two_factor: str = Field(default="", alias="twoFactor")
    is_admin: Optional[bool] = Field(default=None, alias="isAdmin")
    timezone: str = ""
    fields: JSONValue = None


class ProjectMember(CrowdinModel):
    id: int = 0
    username: str = ""
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    full_name: Optional[str] = Field(default=None, alias="fullName")
    role: Optional[str] = None
    permissions: Optional[Dict[str, JSONValue]] = None
    roles: Optional[List[TranslatorRole]] = None
    is_manager: Optional[bool] = Field(default=None, alias="isManager")
    is_developer: Optional[bool] = Field(default=None, alias="isDeveloper")
    access_to_all_workflow_steps: Optional[bool] = Field(default=None, alias="accessToAllWorkflowSteps")
    given_access_at: Optional[str] = Field(default=None, alias="givenAccessAt")
    avatar_url: Optional[str] = Field(default=None, alias="avatarUrl")
    joined_at: Optional[str] = Field(default=None, alias="joinedAt")
    timezone: Optional[str] = None


class UsersListOptions(OrderedListOptions):
    """Filters for listing organization users (Enterprise)

    Args:
        status: active, pending or blocked
        search: Search users by firstName, lastName, username or email
        two_factor: enabled or disabled
    """
    status: Optional[str] = None
    search: Optional[str] = None
    two_factor: Optional[str] = Field(default=None, alias="twoFactor")


class ProjectMembersListOptions(OrderedListOptions):
    search: Optional[str] = None
    role: Optional[str] = None
    language_id: Optional[str] = Field(default=None, alias="languageId")
    workflow_step_id: Optional[int] = Field(default=None, alias="workflowStepId")


class ProjectMemberAddRequest(RequestModel):
    user_ids: Optional[List[int]] = Field(default=None, alias="userIds")
    usernames: Optional[List[str]] = None
    emails: Optional[List[str]] = None
    manager_access: Optional[bool] = Field(default=None, alias="managerAccess")
    developer_access: Optional[bool] = Field(default=None, alias="developerAccess")
    roles: Optional[List[TranslatorRole]] = None

    def validate_request(self) -> None:
        self.require(
            self.user_ids or self.usernames or self.emails,
            "one of fields `userIds`, `usernames` or `emails` is required",
        )


class ProjectMemberReplaceRequest(RequestModel):
    manager_access: Optional[bool] = Field(default=None, alias="managerAccess")
    developer_access: Optional[bool] = Field(default=None, alias="developerAccess")
    roles: Optional[List[TranslatorRole]] = None


class InviteUserRequest(RequestModel):
    email: str = ""
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    timezone: Optional[str] = None
    admin_access: Optional[bool] = Field(default=None, alias="adminAccess")

    def validate_request(self) -> None:
        self.require(self.email, "email is required")
