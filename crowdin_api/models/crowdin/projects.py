from typing import Annotated, Dict, List, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, OrderedListOptions, RequestModel
from crowdin_api.sources.client.crowdin.query import QueryParam

# Project type: 0 = files based, 1 = strings based
PROJECT_TYPE_FILES_BASED = 0
PROJECT_TYPE_STRINGS_BASED = 1


class Language(CrowdinModel):
    id: str = ""
    name: str = ""
    editor_code: str = Field(default="", alias="editorCode")
    two_letters_code: str = Field(default="", alias="twoLettersCode")
    three_letters_code: str = Field(default="", alias="threeLettersCode")
    locale: str = ""
    android_code: str = Field(default="", alias="androidCode")
    os_x_code: str = Field(default="", alias="osxCode")
    os_x_locale: str = Field(default="", alias="osxLocale")
    plural_category_names: List[str] = Field(default_factory=list, alias="pluralCategoryNames")
    plural_rules: str = Field(default="", alias="pluralRules")
    plural_examples: List[str] = Field(default_factory=list, alias="pluralExamples")
    text_direction: str = Field(default="", alias="textDirection")
    dialect_of: Optional[str] = Field(default=None, alias="dialectOf")


class Project(CrowdinModel):
    """Project summary returned by list and get calls.

    `fields` holds custom field values; the server sends an object, an empty
    array or null, and each is kept as sent.
    """
    id: int = 0
    group_id: Optional[int] = Field(default=None, alias="groupId")
    type: int = 0
    user_id: int = Field(default=0, alias="userId")
    source_language_id: str = Field(default="", alias="sourceLanguageId")
    target_language_ids: List[str] = Field(default_factory=list, alias="targetLanguageIds")
    language_access_policy: str = Field(default="", alias="languageAccessPolicy")
    name: str = ""
    cname: Optional[str] = None
    identifier: str = ""
    description: str = ""
    visibility: str = ""
    logo: str = ""
    public_downloads: bool = Field(default=False, alias="publicDownloads")
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")
    last_activity: str = Field(default="", alias="lastActivity")
    source_language: Optional[Language] = Field(default=None, alias="sourceLanguage")
    target_languages: List[Language] = Field(default_factory=list, alias="targetLanguages")
    web_url: str = Field(default="", alias="webUrl")
    fields: JSONValue = None

    # settings, present when the caller has manager access
    translate_duplicates: Optional[int] = Field(default=None, alias="translateDuplicates")
    tags_detection: Optional[int] = Field(default=None, alias="tagsDetection")
    glossary_access: Optional[bool] = Field(default=None, alias="glossaryAccess")
    is_mt_allowed: Optional[bool] = Field(default=None, alias="isMtAllowed")
    auto_substitution: Optional[bool] = Field(default=None, alias="autoSubstitution")
    export_approved_only: Optional[bool] = Field(default=None, alias="exportApprovedOnly")
    qa_check_is_active: Optional[bool] = Field(default=None, alias="qaCheckIsActive")
    qa_check_categories: Optional[Dict[str, bool]] = Field(default=None, alias="qaCheckCategories")
    language_mapping: JSONValue = Field(default=None, alias="languageMapping")
    tm_penalties: JSONValue = Field(default=None, alias="tmPenalties")
    default_tm_id: Optional[int] = Field(default=None, alias="defaultTmId")
    default_glossary_id: Optional[int] = Field(default=None, alias="defaultGlossaryId")


class ProjectsListOptions(OrderedListOptions):
    """Filters for listing projects

    Args:
        user_id: List projects of a specific user (Enterprise)
        has_manager_access: 1 to list only projects the user manages, 0 for all.
            Any other value is left out of the query.
        type: 0 for files based projects, 1 for strings based.
            Any other value is left out of the query.
    """
    user_id: Optional[int] = Field(default=None, alias="userId")
    has_manager_access: Annotated[Optional[int], QueryParam(allowed=(0, 1))] = Field(
        default=None, alias="hasManagerAccess"
    )
    type: Annotated[Optional[int], QueryParam(allowed=(0, 1))] = None


class ProjectsAddRequest(RequestModel):
    name: str = ""
    identifier: Optional[str] = None
    source_language_id: str = Field(default="", alias="sourceLanguageId")
    target_language_ids: Optional[List[str]] = Field(default=None, alias="targetLanguageIds")
    visibility: Optional[str] = None
    language_access_policy: Optional[str] = Field(default=None, alias="languageAccessPolicy")
    cname: Optional[str] = None
    description: Optional[str] = None
    tags_detection: Optional[int] = Field(default=None, alias="tagsDetection")
    is_mt_allowed: Optional[bool] = Field(default=None, alias="isMtAllowed")
    auto_substitution: Optional[bool] = Field(default=None, alias="autoSubstitution")
    public_downloads: Optional[bool] = Field(default=None, alias="publicDownloads")
    skip_untranslated_strings: Optional[bool] = Field(default=None, alias="skipUntranslatedStrings")
    export_approved_only: Optional[bool] = Field(default=None, alias="exportApprovedOnly")
    qa_check_is_active: Optional[bool] = Field(default=None, alias="qaCheckIsActive")
    default_tm_id: Optional[int] = Field(default=None, alias="defaultTmId")
    default_glossary_id: Optional[int] = Field(default=None, alias="defaultGlossaryId")
    type: Optional[int] = None

    def validate_request(self) -> None:
        self.require(self.name, "name is required")
        self.require(self.source_language_id, "sourceLanguageId is required")
        if self.type is not None:
            self.require(
                self.type in (PROJECT_TYPE_FILES_BASED, PROJECT_TYPE_STRINGS_BASED),
                "type must be 0 or 1",
            )
