from typing import Dict, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, OrderedListOptions, RequestModel


class Branch(CrowdinModel):
    id: int = 0
    project_id: int = Field(default=0, alias="projectId")
    name: str = ""
    title: str = ""
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    export_pattern: Optional[str] = Field(default=None, alias="exportPattern")
    priority: Optional[str] = None


class BranchesListOptions(OrderedListOptions):
    """`name` filters branches by name"""
    name: Optional[str] = None


class BranchesAddRequest(RequestModel):
    """Branch name can't contain \\ / : * ? " < > | symbols"""
    name: str = ""
    title: Optional[str] = None
    export_pattern: Optional[str] = Field(default=None, alias="exportPattern")
    priority: Optional[str] = None

    def validate_request(self) -> None:
        self.require(self.name, "name is required")


class MergeAttributes(CrowdinModel):
    source_branch_id: int = Field(default=0, alias="sourceBranchId")
    delete_after_merge: bool = Field(default=False, alias="deleteAfterMerge")


class BranchMerge(CrowdinModel):
    """Status of an asynchronous merge (or clone) operation"""
    identifier: str = ""
    status: str = ""
    progress: int = 0
    attributes: Optional[MergeAttributes] = None
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    started_at: str = Field(default="", alias="startedAt")
    finished_at: str = Field(default="", alias="finishedAt")


class BranchMergeSummary(CrowdinModel):
    status: str = ""
    source_branch_id: int = Field(default=0, alias="sourceBranchId")
    target_branch_id: int = Field(default=0, alias="targetBranchId")
    dry_run: bool = Field(default=False, alias="dryRun")
    details: Dict[str, int] = Field(default_factory=dict)


class BranchesMergeRequest(RequestModel):
    source_branch_id: int = Field(default=0, alias="sourceBranchId")
    delete_after_merge: Optional[bool] = Field(default=None, alias="deleteAfterMerge")
    dry_run: Optional[bool] = Field(default=None, alias="dryRun")

    def validate_request(self) -> None:
        self.require(self.source_branch_id, "sourceBranchId is required")


class BranchesCloneRequest(RequestModel):
    name: str = ""
    title: Optional[str] = None

    def validate_request(self) -> None:
        self.require(self.name, "name is required")
