"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from torrentsrc.infrastructure.sources.constants import (
    DEFAULT_CLIENT_TIMEOUT,
    DEFAULT_MAX_RESULTS,
    DEFAULT_TRANSPORT_POLICY,
    DEFAULT_USER_AGENT,
    PIRATEBAY_BASE_URL,
    PIRATEBAY_PROBE_QUERY,
    TransportPolicy,
)

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (source/http/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="torrentsrc", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Source (YAML section: source.*)
    source_base_url: str = Field(
        default=PIRATEBAY_BASE_URL,
        validation_alias=AliasChoices(
            "source_base_url",
            AliasPath("source", "base_url"),
        ),
        description="Search endpoint prefix; the encoded query is appended.",
    )
    source_probe_query: str = Field(
        default=PIRATEBAY_PROBE_QUERY,
        validation_alias=AliasChoices(
            "source_probe_query",
            AliasPath("source", "probe_query"),
        ),
        description="Harmless query used by the health check.",
    )
    source_max_results: int = Field(
        default=DEFAULT_MAX_RESULTS,
        validation_alias=AliasChoices(
            "source_max_results",
            AliasPath("source", "max_results"),
        ),
        description="Maximum results returned per search (first N in API order).",
    )
    source_transport_policy: TransportPolicy = Field(
        default=DEFAULT_TRANSPORT_POLICY,
        validation_alias=AliasChoices(
            "source_transport_policy",
            AliasPath("source", "transport_policy"),
        ),
        description="lenient: failed searches return []; strict: they raise.",
    )
    source_lowercase_hash: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "source_lowercase_hash",
            AliasPath("source", "lowercase_hash"),
        ),
        description="Lower-case info-hashes extracted from magnet links.",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=DEFAULT_CLIENT_TIMEOUT,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds for outgoing requests.",
    )
    http_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("source_max_results")
    @classmethod
    def _validate_max_results(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("source_max_results must be > 0")
        return v

    @field_validator("source_base_url")
    @classmethod
    def _validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("source_base_url must be an http(s) URL")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "source": {
                "base_url": self.source_base_url,
                "probe_query": self.source_probe_query,
                "max_results": self.source_max_results,
                "transport_policy": self.source_transport_policy,
                "lowercase_hash": self.source_lowercase_hash,
            },
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read TORRENTSRC_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - TORRENTSRC_SOURCE_BASE_URL
    - TORRENTSRC_SOURCE_TRANSPORT_POLICY
    - TORRENTSRC_HTTP_TIMEOUT_SECONDS
    - TORRENTSRC_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="TORRENTSRC_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    source_base_url: Optional[str] = None
    source_probe_query: Optional[str] = None
    source_max_results: Optional[int] = None
    source_transport_policy: Optional[TransportPolicy] = None
    source_lowercase_hash: Optional[bool] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
