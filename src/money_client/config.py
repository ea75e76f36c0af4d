"""
Configuration management.

All configuration keys for the client live here:
- api.base_url: origin of the money tracking service (no trailing slash needed)
- session_path: JSON file holding the persisted identity

Environment variables take precedence over the YAML file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_SESSION_PATH = "data/session.json"


@dataclass
class ApiConfig:
    """Remote service configuration."""

    base_url: str = DEFAULT_BASE_URL


@dataclass
class Config:
    """Application configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    session_path: Path = field(default_factory=lambda: Path(DEFAULT_SESSION_PATH))

    def validate(self) -> list[str]:
        """Validate configuration completeness.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.api.base_url:
            errors.append("api.base_url is required")
        elif not self.api.base_url.startswith(("http://", "https://")):
            errors.append("api.base_url must start with http:// or https://")

        return errors


def load_config(config_path: Path) -> Config:
    """
    Load configuration from YAML file.

    Environment variables can override config values:
    - MONEY_API_URL
    - MONEY_SESSION_PATH
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    api_data = data.get("api") or {}
    api = ApiConfig(
        base_url=os.environ.get("MONEY_API_URL", api_data.get("base_url", DEFAULT_BASE_URL)),
    )

    session_path = os.environ.get(
        "MONEY_SESSION_PATH", data.get("session_path", DEFAULT_SESSION_PATH)
    )

    return Config(api=api, session_path=Path(session_path))


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = f"""# Money tracker client configuration
#
# MONEY_API_URL and MONEY_SESSION_PATH override the values below.

api:
  base_url: "{DEFAULT_BASE_URL}"   # Origin of the money tracking service

# Where the authenticated identity (access token) is persisted
session_path: "{DEFAULT_SESSION_PATH}"
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(default_config)
