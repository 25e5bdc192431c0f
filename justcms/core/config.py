"""Configuration and environment loading for the JustCMS client."""

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError

# Load environment variables from .env file
# Try the package, the project root, then the working directory
_package_dir = Path(__file__).parent.parent  # justcms/
_possible_env_locations = [
    _package_dir / ".env",
    _package_dir.parent / ".env",
    Path.cwd() / ".env",
]

_env_loaded = False
for _env_file in _possible_env_locations:
    if _env_file.exists():
        load_dotenv(_env_file)
        _env_loaded = True
        break

if not _env_loaded:
    load_dotenv()

BASE_URL = "https://api.justcms.co/public"


class Config:
    """Names of the environment keys the client understands."""

    TOKEN_ENV: str = "PUBLIC_JUSTCMS_TOKEN"
    PROJECT_ENV: str = "PUBLIC_JUSTCMS_PROJECT"

    # Logging
    LOG_LEVEL_ENV: str = "JUSTCMS_LOG_LEVEL"
    LOG_JSON_ENV: str = "JUSTCMS_LOG_JSON"

    @classmethod
    def log_level(cls) -> str:
        """Log level name for setup_logging (default INFO)."""
        return os.getenv(cls.LOG_LEVEL_ENV, "INFO").upper()

    @classmethod
    def json_logging(cls) -> bool:
        """Whether logs should be emitted as JSON lines."""
        return os.getenv(cls.LOG_JSON_ENV, "FALSE").upper() == "TRUE"


class ClientConfig(BaseModel):
    """Resolved credentials for one JustCMS project."""

    model_config = ConfigDict(frozen=True)

    api_token: str = Field(repr=False)
    project_id: str
    base_url: str = BASE_URL

    @property
    def project_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.project_id}"

    def auth_headers(self) -> dict[str, str]:
        """Get the bearer authorization header."""
        return {"Authorization": f"Bearer {self.api_token}"}


def resolve_config(
    api_token: str | None = None,
    project_id: str | None = None,
    env: Mapping[str, str] | None = None,
) -> ClientConfig:
    """Resolve the API token and project id.

    Explicit arguments win; otherwise the values are read from ``env``
    (``os.environ`` by default) under ``PUBLIC_JUSTCMS_TOKEN`` and
    ``PUBLIC_JUSTCMS_PROJECT``. Empty strings count as missing.

    Raises:
        ConfigurationError: If the token or the project id cannot be resolved.
    """
    if env is None:
        env = os.environ

    token = api_token or env.get(Config.TOKEN_ENV)
    project = project_id or env.get(Config.PROJECT_ENV)

    if not token:
        raise ConfigurationError("JustCMS API token is required")
    if not project:
        raise ConfigurationError("JustCMS project ID is required")

    return ClientConfig(api_token=token, project_id=project)
