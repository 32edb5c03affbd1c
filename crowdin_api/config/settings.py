"""
Client settings.

Loads Crowdin client configuration from environment variables (and a local
`.env` file, if present) and provides defaults for everything but the token.
"""

import os
from typing import Dict, Optional

import dotenv  # type: ignore
from pydantic import BaseModel, Field, field_validator  # type: ignore

from crowdin_api.config.constants.crowdin import DEFAULT_BASE_URL, USER_AGENT


class CrowdinSettings(BaseModel):
    """Crowdin client settings."""

    token: str = Field(default="", description="Personal access token")
    organization: Optional[str] = Field(default=None, description="Enterprise organization name")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base API URL")
    timeout: Optional[float] = Field(default=None, description="Whole-request timeout in seconds")
    user_agent: str = Field(default=USER_AGENT, description="User-Agent header value")
    requests_per_second: Optional[float] = Field(default=None, description="Client-side request throttle")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("organization")
    @classmethod
    def validate_organization(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank organization as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls) -> "CrowdinSettings":
        """
        Load settings from environment variables.

        Returns:
            CrowdinSettings instance with values from environment
        """
        dotenv.load_dotenv()

        timeout = os.getenv("CROWDIN_TIMEOUT")
        rps = os.getenv("CROWDIN_REQUESTS_PER_SECOND")
        return cls(
            token=os.getenv("CROWDIN_TOKEN", ""),
            organization=os.getenv("CROWDIN_ORGANIZATION"),
            base_url=os.getenv("CROWDIN_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(timeout) if timeout else None,
            user_agent=os.getenv("CROWDIN_USER_AGENT", USER_AGENT),
            requests_per_second=float(rps) if rps else None,
            log_level=os.getenv("CROWDIN_LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict:
        """Convert settings to dictionary, without the token."""
        return self.model_dump(exclude={"token"})
