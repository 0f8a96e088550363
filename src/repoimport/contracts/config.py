"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

GITHUB_URL_FRAGMENTS: tuple[str, ...] = ("https://", "http://", "www.", "github.com/")
"""Fragments stripped from a repository URL, in order, before it is split."""

DEFAULT_ROLE = "Developer"
"""Role assigned to every imported collaborator; the hosting API has no role concept."""


class ImporterConfig(BaseModel):
    source: str = "github"
    api_base_url: str = "https://api.github.com"
    raw_content_base_url: str = "https://raw.githubusercontent.com"
    readme_filename: str = "README.md"
    default_role: str = Field(default=DEFAULT_ROLE, min_length=1)
    fallback_branch: str = Field(default="HEAD", min_length=1)
    url_fragments: tuple[str, ...] = GITHUB_URL_FRAGMENTS
    timeout_seconds: float = Field(default=30.0, gt=0, le=300)
    auth: str = "none"
    token: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> ImporterConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"none", "env", "token"}:
            raise ValueError("auth must be one of: none, env, token")
        return self
