"""Public API surface for repoimport."""

from repoimport.auth import create_token_resolver
from repoimport.contracts.config import DEFAULT_ROLE, ImporterConfig
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
from repoimport.contracts.result import FetchFailure, FetchResult, FetchSuccess
from repoimport.contracts.source import RepositorySource
from repoimport.engine import ImportEngine, map_project
from repoimport.providers import create_source
from repoimport.providers.github import parse_repository_url
from repoimport.renderers import create_renderer
from repoimport.sdk import RepoImporter, import_project, load_config, parse_reference

__all__ = [
    "DEFAULT_ROLE",
    "AuthenticationError",
    "ConfigError",
    "Contributor",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "ImportEngine",
    "ImportResult",
    "ImporterConfig",
    "MappedCollaborator",
    "MappedProject",
    "ProviderError",
    "RepoImportError",
    "RepoImporter",
    "RepositoryMetadata",
    "RepositoryReference",
    "RepositorySource",
    "RepositoryURLError",
    "create_renderer",
    "create_source",
    "create_token_resolver",
    "import_project",
    "load_config",
    "map_project",
    "parse_reference",
    "parse_repository_url",
]
