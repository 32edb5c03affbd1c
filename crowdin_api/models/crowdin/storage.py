from pydantic import Field  # type: ignore

from crowdin_api.models.crowdin.common import CrowdinModel


class Storage(CrowdinModel):
    """A file uploaded to storage. Kept by the server for 24 hours."""
    id: int = 0
    file_name: str = Field(default="", alias="fileName")
