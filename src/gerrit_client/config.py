"""Configuration models for the Gerrit client and the gerritctl CLI."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator

from .auth import AuthScheme
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class TransportConfig(BaseModel):
    """Connection pool and timeout policy for one client instance."""

    max_connections: int = Field(
        default=100, ge=1, description="Maximum number of open connections"
    )
    max_keepalive_connections: int = Field(
        default=100, ge=0, description="Maximum number of idle keep-alive connections"
    )
    keepalive_expiry: float = Field(
        default=60.0, gt=0, description="Idle connection lifetime in seconds"
    )
    connect_timeout: float = Field(
        default=15.0, gt=0, description="TCP connect and TLS handshake timeout in seconds"
    )
    timeout: float = Field(
        default=30.0, gt=0, description="Read, write and pool timeout in seconds"
    )
    verify_ssl: bool = Field(default=True, description="Verify server TLS certificates")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    trust_env: bool = Field(
        default=True, description="Honour proxy settings from the environment"
    )
    user_agent: Optional[str] = Field(
        default=None, description="Custom User-Agent header"
    )

    def build_http_client(self) -> httpx.AsyncClient:
        """Create an ``httpx.AsyncClient`` applying this policy."""
        timeouts = httpx.Timeout(self.timeout, connect=self.connect_timeout)

        limits = httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive_connections,
            keepalive_expiry=self.keepalive_expiry,
        )

        headers = {}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        return httpx.AsyncClient(
            timeout=timeouts,
            limits=limits,
            headers=headers,
            follow_redirects=self.follow_redirects,
            verify=self.verify_ssl,
            trust_env=self.trust_env,
        )


class CLIConfig(BaseModel):
    """Connection settings used by gerritctl."""

    url: str = Field(..., description="Gerrit server URL")
    username: str = Field(default="", description="Account username")
    password: str = Field(default="", description="HTTP password")
    auth_type: AuthScheme = Field(
        default=AuthScheme.BASIC, description="Authentication scheme"
    )
    transport: TransportConfig = Field(default_factory=TransportConfig)

    @field_validator("auth_type", mode="before")
    @classmethod
    def normalize_auth_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower() or AuthScheme.BASIC
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)


ENV_OVERRIDES = {
    "GERRITCTL_URL": "url",
    "GERRITCTL_USERNAME": "username",
    "GERRITCTL_PASSWORD": "password",
    "GERRITCTL_AUTH_TYPE": "auth_type",
}


class ConfigManager:
    """Loads and saves the gerritctl JSON configuration."""

    DEFAULT_CONFIG_PATH = Path.home() / ".config" / "gerritctl" / "config.json"

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else self.DEFAULT_CONFIG_PATH
        self._config: Optional[CLIConfig] = None

    def load(self, use_env: bool = True) -> CLIConfig:
        """Load configuration from file, then apply environment overrides.

        A missing file is only acceptable when the environment supplies the URL.

        Raises:
            ConfigurationError: If the file is unreadable or the settings invalid
        """
        data: Dict[str, Any] = {}

        if self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigurationError(
                    f"Failed to load config from {self.config_path}", str(e)
                )
            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Config file {self.config_path} must contain a JSON object"
                )
            # Accept the capitalised keys written by older gerritctl releases
            data = {key.lower(): value for key, value in data.items()}
        else:
            logger.debug(f"Config file {self.config_path} not found")

        if use_env:
            for env_name, key in ENV_OVERRIDES.items():
                if env_name in os.environ:
                    data[key] = os.environ[env_name]

        if not data.get("url"):
            raise ConfigurationError(
                "No Gerrit URL configured",
                f"create {self.config_path} or set GERRITCTL_URL",
            )

        try:
            self._config = CLIConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {self.config_path}", str(e)
            )

        return self._config

    def save(self, config: Optional[CLIConfig] = None) -> None:
        """Write configuration to file with owner-only permissions."""
        if config is None:
            config = self._config

        if config is None:
            raise ConfigurationError("No configuration to save")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        # Owner-only from creation
        fd = os.open(self.config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump(config.model_dump(mode="json"), f, indent=2)
        # An existing file keeps its old mode on open
        os.chmod(self.config_path, 0o600)
