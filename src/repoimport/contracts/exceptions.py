"""Exception hierarchy for repoimport."""

from __future__ import annotations


class RepoImportError(Exception):
    """Base exception for all repoimport errors."""


class ConfigError(RepoImportError):
    """Configuration loading or validation failure."""


class ProviderError(RepoImportError):
    """Base source operation failure."""


class AuthenticationError(ProviderError):
    """Authentication token could not be resolved."""


class RepositoryURLError(ProviderError):
    """Repository URL does not decompose into owner and repository name."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url
