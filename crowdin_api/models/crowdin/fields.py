from enum import Enum
from typing import List, Optional

from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel, JSONValue, ListOptions, RequestModel


class FieldType(str, Enum):
    CHECKBOX = "checkbox"
    RADIOBUTTONS = "radiobuttons"
    DATE = "date"
    DATETIME = "datetime"
    NUMBER = "number"
    LABELS = "labels"
    SELECT = "select"
    MULTISELECT = "multiselect"
    TEXT = "text"
    TEXTAREA = "textarea"
    URL = "url"


class FieldEntity(str, Enum):
    PROJECT = "project"
    USER = "user"
    TASK = "task"
    FILE = "file"
    TRANSLATION = "translation"
    STRING = "string"


class CustomField(CrowdinModel):
    """Custom field definition (Enterprise).

    `config` depends on the field type: an object with options, locations or
    bounds, an empty array when the type has nothing to configure, or null.
    """
    id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    type: str = ""
    config: JSONValue = None
    entities: JSONValue = None
    created_at: str = Field(default="", alias="createdAt")
    updated_at: str = Field(default="", alias="updatedAt")


class FieldsListOptions(ListOptions):
    search: Optional[str] = None
    entity: Optional[FieldEntity] = None
    type: Optional[FieldType] = None


class FieldAddRequest(RequestModel):
    name: str = ""
    slug: str = ""
    type: Optional[FieldType] = None
    entities: List[FieldEntity] = Field(default_factory=list)
    description: Optional[str] = None
    config: JSONValue = None

    def validate_request(self) -> None:
        self.require(self.name, "name is required")
        self.require(self.slug, "slug is required")
        self.require(self.type, "type is required")
        self.require(self.entities, "entities is required")
