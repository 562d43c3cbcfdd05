"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear error is raised
at startup instead of a cryptic KeyError deep in application code.

Each top-level class corresponds to one file in quickhttp/config/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# application.yaml
# =============================================================================


class ClientConfig(_StrictBase):
    """
    Process-wide HTTP client settings.

    Built once at startup and passed explicitly to the request builder
    and the HTTP client. Never mutated; use model_copy(update=...) for
    per-invocation overrides.
    """

    user_agent: str = Field(min_length=1)
    default_headers: dict[str, str] = Field(default_factory=dict)
    timeout_seconds: float = Field(gt=0)
    follow_redirects: bool = True


class OutputConfig(_StrictBase):
    """Terminal rendering settings."""

    theme: str = "monokai"
    color_system: Literal["standard", "256", "truecolor"] = "truecolor"
    json_indent: int = Field(default=2, ge=0, le=8)


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    client: ClientConfig
    output: OutputConfig


# =============================================================================
# logging.yaml
# =============================================================================


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["console", "json"]
