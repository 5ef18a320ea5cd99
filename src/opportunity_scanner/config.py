"""Scanner settings loaded from YAML with environment overrides."""

import os
from pathlib import Path
from typing import Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field

from opportunity_scanner.connectors.base import DEFAULT_QUERY
from opportunity_scanner.models.filters import FilterState

TOKEN_ENV_VAR = "GMAIL_ACCESS_TOKEN"


class ScannerSettings(BaseModel):
    """How many messages to fetch, from where, and what to show."""

    access_token: Optional[str] = Field(default=None, description="Gmail OAuth bearer token")
    max_results: int = Field(default=50, ge=1, description="Message IDs to list")
    fetch_limit: int = Field(default=20, ge=1, description="Messages to fetch and classify")
    query: Optional[str] = DEFAULT_QUERY
    timeout: float = Field(default=30.0, gt=0)
    workers: int = Field(default=1, ge=1, description="Classification threads")
    filters: FilterState = Field(default_factory=FilterState)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ScannerSettings":
        """Load settings from YAML file. Supports nested (gmail/filters) or flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        gmail = data.get("gmail") or {}
        flat: dict = {}

        for key in ("access_token", "max_results", "fetch_limit", "query", "timeout"):
            value = gmail.get(key, data.get(key))
            if value is not None:
                flat[key] = value
        if data.get("workers") is not None:
            flat["workers"] = data["workers"]
        if data.get("filters"):
            flat["filters"] = data["filters"]
        return cls.model_validate(flat).with_env()

    def with_env(self) -> "ScannerSettings":
        """Fill the access token from GMAIL_ACCESS_TOKEN when not configured."""
        if self.access_token:
            return self
        env_token = os.environ.get(TOKEN_ENV_VAR)
        if env_token and env_token.strip():
            return self.model_copy(update={"access_token": env_token.strip()})
        return self
