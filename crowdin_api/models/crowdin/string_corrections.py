from typing import Annotated, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, OrderedListOptions, RequestModel
from crowdin_api.models.crowdin.users import User
from crowdin_api.sources.client.crowdin.query import QueryParam


class StringCorrection(CrowdinModel):
    id: int = 0
    text: str = ""
    plural_category_name: Optional[str] = Field(default=None, alias="pluralCategoryName")
    user: Optional[User] = None
    created_at: str = Field(default="", alias="createdAt")


class StringCorrectionsListOptions(OrderedListOptions):
    """`string_id` is required by the server; `denormalize_placeholders` is 0 or 1"""
    string_id: Optional[int] = Field(default=None, alias="stringId")
    denormalize_placeholders: Annotated[Optional[int], QueryParam(allowed=(0, 1))] = Field(
        default=None, alias="denormalizePlaceholders"
    )


class StringCorrectionGetOptions(CrowdinModel):
    denormalize_placeholders: Annotated[Optional[int], QueryParam(allowed=(0, 1))] = Field(
        default=None, alias="denormalizePlaceholders"
    )


class StringCorrectionsDeleteOptions(CrowdinModel):
    """Deletes every correction of one string"""
    string_id: Optional[int] = Field(default=None, alias="stringId")


class StringCorrectionAddRequest(RequestModel):
    string_id: int = Field(default=0, alias="stringId")
    text: str = ""
    plural_category_name: Optional[str] = Field(default=None, alias="pluralCategoryName")

    def validate_request(self) -> None:
        self.require(self.string_id, "stringId is required")
        self.require(self.text, "text is required")
