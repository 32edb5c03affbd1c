from typing import List, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, ListOptions, RequestModel

LENGTH_TRANSFORMATION_MIN = -50
LENGTH_TRANSFORMATION_MAX = 100


class DownloadLink(CrowdinModel):
    url: str = ""
    expire_in: str = Field(default="", alias="expireIn")
    etag: Optional[str] = None


class BuildAttributes(CrowdinModel):
    branch_id: Optional[int] = Field(default=None, alias="branchId")
    directory_id: Optional[int] = Field(default=None, alias="directoryId")
    target_language_ids: Optional[List[str]] = Field(default=None, alias="targetLanguageIds")
    skip_untranslated_strings: Optional[bool] = Field(default=None, alias="skipUntranslatedStrings")
    skip_untranslated_files: Optional[bool] = Field(default=None, alias="skipUntranslatedFiles")
    export_approved_only: Optional[bool] = Field(default=None, alias="exportApprovedOnly")
    export_with_min_approvals_count: Optional[int] = Field(default=None, alias="exportWithMinApprovalsCount")
    export_strings_that_passed_workflow: Optional[bool] = Field(
        default=None, alias="exportStringsThatPassedWorkflow"
    )
    pseudo: Optional[bool] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    length_transformation: Optional[int] = Field(default=None, alias="lengthTransformation")
    char_transformation: Optional[str] = Field(default=None, alias="charTransformation")


class ProjectBuild(CrowdinModel):
    id: int = 0
    project_id: int = Field(default=0, alias="projectId")
    status: str = ""
    progress: int = 0
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    finished_at: str = Field(default="", alias="finishedAt")
    attributes: Optional[BuildAttributes] = None


class BuildsListOptions(ListOptions):
    branch_id: Optional[int] = Field(default=None, alias="branchId")


class _ExportFlags(RequestModel):
    skip_untranslated_strings: Optional[bool] = Field(default=None, alias="skipUntranslatedStrings")
    skip_untranslated_files: Optional[bool] = Field(default=None, alias="skipUntranslatedFiles")
    export_approved_only: Optional[bool] = Field(default=None, alias="exportApprovedOnly")
    export_with_min_approvals_count: Optional[int] = Field(default=None, alias="exportWithMinApprovalsCount")
    export_strings_that_passed_workflow: Optional[bool] = Field(
        default=None, alias="exportStringsThatPassedWorkflow"
    )

    def validate_request(self) -> None:
        self.require(
            not (self.skip_untranslated_strings and self.skip_untranslated_files),
            "skipUntranslatedStrings and skipUntranslatedFiles must not be true at the same request",
        )
        self.require(
            not ((self.export_with_min_approvals_count or 0) > 0 and self.export_strings_that_passed_workflow),
            "exportWithMinApprovalsCount and exportStringsThatPassedWorkflow must not be true at the same request",
        )


class BuildProjectFileTranslationRequest(_ExportFlags):
    target_language_id: str = Field(default="", alias="targetLanguageId")

    def validate_request(self) -> None:
        self.require(self.target_language_id, "targetLanguageId is required")
        super().validate_request()


class BuildProjectRequest(_ExportFlags):
    branch_id: Optional[int] = Field(default=None, alias="branchId")
    target_language_ids: Optional[List[str]] = Field(default=None, alias="targetLanguageIds")


class PseudoBuildProjectRequest(RequestModel):
    pseudo: bool = True
    branch_id: Optional[int] = Field(default=None, alias="branchId")
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    length_transformation: Optional[int] = Field(default=None, alias="lengthTransformation")
    char_transformation: Optional[str] = Field(default=None, alias="charTransformation")

    def validate_request(self) -> None:
        if self.length_transformation is not None:
            self.require(
                LENGTH_TRANSFORMATION_MIN <= self.length_transformation <= LENGTH_TRANSFORMATION_MAX,
                "lengthTransformation must be from -50 to 100",
            )
