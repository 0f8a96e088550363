"""Factory for creating repository sources.

Decouples source selection from source implementation so the SDK can pick a
hosting service by configured name.
"""

from __future__ import annotations

from repoimport.contracts.config import ImporterConfig
from repoimport.contracts.exceptions import ProviderError
from repoimport.contracts.source import RepositorySource
from repoimport.providers.github.source import GitHubSource

SOURCES: dict[str, type[GitHubSource]] = {"github": GitHubSource}


def create_source(config: ImporterConfig, *, token: str | None = None) -> RepositorySource:
    """Create the source named by ``config.source``.

    The returned source is an async context manager::

        async with create_source(config, token=token) as source:
            result = await source.fetch_repository(reference)

    Raises:
        ProviderError: If no source is registered under that name.
    """
    source_cls = SOURCES.get(config.source)
    if source_cls is None:
        raise ProviderError(f"Unknown source: {config.source}")
    return source_cls(config=config, token=token)
