from typing import Dict, List, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, OrderedListOptions, RequestModel
from crowdin_api.models.crowdin.users import TranslatorRole


class Team(CrowdinModel):
    id: int = 0
    name: str = ""
    total_members: int = Field(default=0, alias="totalMembers")
    web_url: str = Field(default="", alias="webUrl")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")


class TeamsListOptions(OrderedListOptions):
    """Filters for listing teams. The id filters are comma-joined on the wire."""
    search: Optional[str] = None
    project_ids: Optional[List[int]] = Field(default=None, alias="projectIds")
    project_roles: Optional[List[str]] = Field(default=None, alias="projectRoles")
    language_ids: Optional[List[str]] = Field(default=None, alias="languageIds")
    group_ids: Optional[List[int]] = Field(default=None, alias="groupIds")


class TeamAddRequest(RequestModel):
    name: str = ""

    def validate_request(self) -> None:
        self.require(self.name, "name is required")


class TeamMember(CrowdinModel):
    id: int = 0
    username: str = ""
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    avatar_url: str = Field(default="", alias="avatarUrl")
    added_at: str = Field(default="", alias="addedAt")


class TeamMemberAddRequest(RequestModel):
    user_ids: List[int] = Field(default_factory=list, alias="userIds")

    def validate_request(self) -> None:
        self.require(self.user_ids, "userIds is required")


class ProjectTeam(CrowdinModel):
    id: int = 0
    has_manager_access: bool = Field(default=False, alias="hasManagerAccess")
    has_developer_access: bool = Field(default=False, alias="hasDeveloperAccess")
    has_access_to_all_workflow_steps: bool = Field(default=False, alias="hasAccessToAllWorkflowSteps")
    permissions: Optional[Dict[str, JSONValue]] = None
    roles: Optional[List[TranslatorRole]] = None


class ProjectTeamAddRequest(RequestModel):
    team_id: int = Field(default=0, alias="teamId")
    manager_access: Optional[bool] = Field(default=None, alias="managerAccess")
    developer_access: Optional[bool] = Field(default=None, alias="developerAccess")
    roles: Optional[List[TranslatorRole]] = None

    def validate_request(self) -> None:
        self.require(self.team_id, "teamId is required")


class ProjectTeamAddResult(CrowdinModel):
    """Adding a team to a project reports the team under one of the two keys"""
    skipped: Optional[ProjectTeam] = None
    added: Optional[ProjectTeam] = None
