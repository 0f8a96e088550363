"""Public contracts for repoimport."""

from repoimport.contracts.config import DEFAULT_ROLE, GITHUB_URL_FRAGMENTS, ImporterConfig
from repoimport.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    ProviderError,
    RepoImportError,
    RepositoryURLError,
)
from repoimport.contracts.import_result import ImportResult
from repoimport.contracts.project import (
    Contributor,
    MappedCollaborator,
    MappedProject,
    RepositoryMetadata,
    RepositoryReference,
)
from repoimport.contracts.renderer import DescriptionRenderer
from repoimport.contracts.result import FetchFailure, FetchResult, FetchSuccess, value_or
from repoimport.contracts.source import RepositorySource

__all__ = [
    "DEFAULT_ROLE",
    "GITHUB_URL_FRAGMENTS",
    "AuthenticationError",
    "ConfigError",
    "Contributor",
    "DescriptionRenderer",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "ImportResult",
    "ImporterConfig",
    "MappedCollaborator",
    "MappedProject",
    "ProviderError",
    "RepoImportError",
    "RepositoryMetadata",
    "RepositoryReference",
    "RepositorySource",
    "RepositoryURLError",
    "value_or",
]
