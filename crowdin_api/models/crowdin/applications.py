from typing import List, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, RequestModel


class Permission(CrowdinModel):
    """`value` is one of own, owner, managers, all, guests, restricted"""
    value: Optional[str] = None
    ids: Optional[List[int]] = None


class ProjectPermission(CrowdinModel):
    project: Optional[Permission] = None


class UserPermission(CrowdinModel):
    user: Optional[Permission] = None


class DefaultPermissions(CrowdinModel):
    user: str = ""
    project: str = ""


class Module(CrowdinModel):
    key: str = ""
    type: str = ""
    data: JSONValue = None
    permissions: Optional[UserPermission] = None
    authentication_type: str = Field(default="", alias="authenticationType")


class Installation(CrowdinModel):
    identifier: str = ""
    name: str = ""
    description: str = ""
    logo: str = ""
    base_url: str = Field(default="", alias="baseUrl")
    manifest_url: str = Field(default="", alias="manifestUrl")
    created_at: str = Field(default="", alias="createdAt")
    modules: List[Module] = Field(default_factory=list)
    scopes: List[str] = Field(default_factory=list)
    permissions: Optional[ProjectPermission] = None
    default_permissions: Optional[DefaultPermissions] = Field(default=None, alias="defaultPermissions")
    limit_reached: bool = Field(default=False, alias="limitReached")


class InstallationModule(CrowdinModel):
    key: Optional[str] = None
    permissions: Optional[UserPermission] = None


class InstallApplicationRequest(RequestModel):
    url: str = ""
    permissions: Optional[ProjectPermission] = None
    modules: Optional[List[InstallationModule]] = None

    def validate_request(self) -> None:
        self.require(self.url, "url is required")
