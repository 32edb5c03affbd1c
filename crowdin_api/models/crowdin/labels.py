from typing import List, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, OrderedListOptions, RequestModel


class Label(CrowdinModel):
    id: int = 0
    title: str = ""


class LabelsListOptions(OrderedListOptions):
    pass


class LabelAddRequest(RequestModel):
    title: str = ""

    def validate_request(self) -> None:
        self.require(self.title, "title is required")


class AssignToStringsRequest(RequestModel):
    string_ids: List[int] = Field(default_factory=list, alias="stringIds")

    def validate_request(self) -> None:
        self.require(self.string_ids, "stringIds cannot be empty")


class SourceString(CrowdinModel):
    """Source string as returned by label assignment calls.

    `text` is a plain string, or an object of plural forms for plural strings.
    """
    id: int = 0
    project_id: int = Field(default=0, alias="projectId")
    branch_id: Optional[int] = Field(default=None, alias="branchId")
    identifier: str = ""
    text: JSONValue = None
    type: str = ""
    context: str = ""
    max_length: int = Field(default=0, alias="maxLength")
    is_hidden: bool = Field(default=False, alias="isHidden")
    is_duplicate: bool = Field(default=False, alias="isDuplicate")
    label_ids: List[int] = Field(default_factory=list, alias="labelIds")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
