"""
Process configuration for ReviewBrief.

Everything is read once from the environment at startup (after .env is
loaded by the entry point) and frozen. Missing credentials are not an error
here: each source checks its own settings before making a request, so a
missing Jira token only disables the Jira lookup.
"""
from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# SOURCE SETTINGS
# =============================================================================


class JiraSettings(BaseModel):
    """Jira Cloud credentials. Basic auth is built from email + API token."""
    model_config = ConfigDict(frozen=True)

    email: str = ""
    api_token: str = ""
    domain: str = ""

    @field_validator("domain")
    @classmethod
    def strip_scheme(cls, domain: str) -> str:
        """Accept 'acme.atlassian.net' as well as a pasted 'https://acme.atlassian.net/'."""
        domain = domain.strip()
        for prefix in ("https://", "http://"):
            if domain.startswith(prefix):
                domain = domain[len(prefix):]
        return domain.rstrip("/")

    def missing(self) -> list[str]:
        """Names of the environment variables that still need a value."""
        required = {
            "JIRA_EMAIL": self.email,
            "JIRA_API_TOKEN": self.api_token,
            "JIRA_DOMAIN": self.domain,
        }
        return [name for name, value in required.items() if not value]


class GitHubSettings(BaseModel):
    """GitHub token and the account that owns the repositories being reviewed."""
    model_config = ConfigDict(frozen=True)

    token: str = ""
    owner: str = ""
    api_url: str = "https://api.github.com"

    def missing(self) -> list[str]:
        required = {
            "GITHUB_TOKEN": self.token,
            "GITHUB_OWNER": self.owner,
        }
        return [name for name, value in required.items() if not value]


# =============================================================================
# MODEL SETTINGS
# =============================================================================
# Defaults target a local Ollama server through its OpenAI-compatible API.
# =============================================================================

DEFAULT_MODEL = "llama3.2"
DEFAULT_BASE_URL = "http://localhost:11434/v1"


class ModelSettings(BaseModel):
    """Which local model to call and how."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = Field(default=DEFAULT_MODEL, min_length=1)
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    max_retries: int = Field(default=2, ge=0)
    base_url: str = DEFAULT_BASE_URL
    api_key: str = "ollama"  # Ollama ignores it, but the client requires one
    timeout_seconds: Optional[float] = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, base_url: str) -> str:
        base_url = base_url.strip().rstrip("/")
        if not base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {base_url!r}")
        return base_url


# =============================================================================
# ROOT SETTINGS
# =============================================================================


def _read(environ: Mapping[str, str], name: str) -> str:
    return (environ.get(name) or "").strip()


class Settings(BaseModel):
    """Root configuration, built once per process with Settings.from_env()."""
    model_config = ConfigDict(frozen=True)

    jira: JiraSettings = Field(default_factory=JiraSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    model: ModelSettings = Field(default_factory=ModelSettings)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Build settings from environment variables.

        Unset or blank model variables fall back to the ModelSettings defaults.
        Raises pydantic.ValidationError if a model variable is present but invalid
        (e.g. LLM_TEMPERATURE=hot).
        """
        env = os.environ if environ is None else environ

        model_values = {
            "model_name": _read(env, "LLM_MODEL"),
            "temperature": _read(env, "LLM_TEMPERATURE"),
            "max_retries": _read(env, "LLM_MAX_RETRIES"),
            "base_url": _read(env, "LLM_BASE_URL"),
            "api_key": _read(env, "LLM_API_KEY"),
            "timeout_seconds": _read(env, "LLM_TIMEOUT"),
        }

        github_values = {
            "token": _read(env, "GITHUB_TOKEN"),
            "owner": _read(env, "GITHUB_OWNER"),
        }
        if api_url := _read(env, "GITHUB_API_URL"):
            github_values["api_url"] = api_url.rstrip("/")

        return cls(
            jira=JiraSettings(
                email=_read(env, "JIRA_EMAIL"),
                api_token=_read(env, "JIRA_API_TOKEN"),
                domain=_read(env, "JIRA_DOMAIN"),
            ),
            github=GitHubSettings(**github_values),
            model=ModelSettings(**{key: value for key, value in model_values.items() if value}),
        )
