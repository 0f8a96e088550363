"""SDK composition root for repoimport."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from repoimport.auth import create_token_resolver
from repoimport.contracts.config import ImporterConfig
from repoimport.contracts.exceptions import ConfigError
from repoimport.contracts.import_result import ImportResult
from repoimport.contracts.project import MappedProject, RepositoryReference
from repoimport.contracts.renderer import DescriptionRenderer
from repoimport.contracts.source import RepositorySource
from repoimport.engine import ImportEngine
from repoimport.providers.factory import create_source
from repoimport.renderers import create_renderer


def load_config(path: str | Path) -> ImporterConfig:
    """Load and validate importer config from a JSON file."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return ImporterConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def parse_reference(url: str, config: ImporterConfig | None = None) -> RepositoryReference:
    """Parse *url* with the configured source without opening it.

    Raises:
        RepositoryURLError: If *url* does not name an owner and repository.
    """
    return create_source(config or ImporterConfig()).parse_reference(url)


SourceFactory = Callable[[], RepositorySource]


class RepoImporter:
    """repoimport SDK public API.

    Wires a repository source and a description renderer into an
    :class:`ImportEngine`. Every import builds its own source from
    *source_factory* and opens it for the duration of that run, so one
    importer can serve concurrent imports.
    """

    def __init__(
        self,
        *,
        source_factory: SourceFactory,
        renderer: DescriptionRenderer,
        config: ImporterConfig,
    ) -> None:
        self._source_factory = source_factory
        self._renderer = renderer
        self._config = config

    @classmethod
    async def from_config(cls, config: ImporterConfig, *, renderer_name: str = "html") -> RepoImporter:
        token = await create_token_resolver(config).resolve()
        try:
            renderer = create_renderer(renderer_name)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        # Fail fast on an unknown source instead of on the first run.
        create_source(config, token=token)
        return cls(source_factory=lambda: create_source(config, token=token), renderer=renderer, config=config)

    @property
    def config(self) -> ImporterConfig:
        return self._config

    async def run(self, url: str) -> ImportResult:
        """Import *url*, returning the project together with any degraded fetches."""
        async with self._source_factory() as source:
            engine = ImportEngine(source, self._renderer, self._config)
            return await engine.run(url)

    async def import_project(self, url: str) -> MappedProject:
        """Import *url* into a :class:`MappedProject`.

        Raises:
            RepositoryURLError: If *url* does not name an owner and repository.
        """
        result = await self.run(url)
        return result.project


async def import_project(url: str, *, config: ImporterConfig | None = None) -> MappedProject:
    """Import a repository with a one-off :class:`RepoImporter`.

    The URL is parsed before any token is resolved, so a malformed URL is
    reported as such even when credentials are missing.
    """
    config = config or ImporterConfig()
    parse_reference(url, config)
    importer = await RepoImporter.from_config(config)
    return await importer.import_project(url)
