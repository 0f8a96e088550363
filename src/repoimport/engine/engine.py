"""Import pipeline engine."""

from __future__ import annotations

import asyncio
import logging

from repoimport.contracts.config import ImporterConfig
from repoimport.contracts.exceptions import ProviderError
from repoimport.contracts.import_result import ImportResult
from repoimport.contracts.project import MappedProject, RepositoryMetadata, RepositoryReference
from repoimport.contracts.renderer import DescriptionRenderer
from repoimport.contracts.result import FetchFailure, FetchResult, FetchSuccess
from repoimport.contracts.source import RepositorySource
from repoimport.engine.mapping import map_project

_LOG = logging.getLogger(__name__)


class ImportEngine:
    """Parses a repository URL, fetches its details concurrently and maps them.

    Metadata and README are fetched in sequence (the README lives on the
    default branch named by the metadata) while contributors are fetched
    alongside. Only an unparsable URL fails the import; a failed fetch
    degrades the fields it feeds.
    """

    def __init__(
        self,
        source: RepositorySource,
        renderer: DescriptionRenderer,
        config: ImporterConfig,
    ) -> None:
        self._source = source
        self._renderer = renderer
        self._config = config

    async def import_project(self, url: str) -> MappedProject:
        result = await self.run(url)
        return result.project

    async def run(self, url: str) -> ImportResult:
        reference = self._source.parse_reference(url)
        _LOG.debug("Importing %s", reference.slug)

        try:
            async with asyncio.TaskGroup() as tg:
                details_task = tg.create_task(self._fetch_details(reference))
                contributors_task = tg.create_task(self._source.fetch_contributors(reference))
        except* ProviderError as provider_error_group:
            raise provider_error_group.exceptions[0] from None

        repository, readme = details_task.result()
        contributors = contributors_task.result()

        failures = tuple(
            result for result in (repository, readme, contributors) if isinstance(result, FetchFailure)
        )
        for failure in failures:
            _LOG.warning("Import of %s degraded: %s", reference.slug, failure.message)

        project = map_project(
            repository,
            readme,
            contributors,
            renderer=self._renderer,
            default_role=self._config.default_role,
        )
        return ImportResult(reference=reference, project=project, failures=failures)

    async def _fetch_details(
        self, reference: RepositoryReference
    ) -> tuple[FetchResult[RepositoryMetadata], FetchResult[str]]:
        repository = await self._source.fetch_repository(reference)
        branch = self._readme_branch(repository)
        readme = await self._source.fetch_readme(reference, branch)
        return repository, readme

    def _readme_branch(self, repository: FetchResult[RepositoryMetadata]) -> str:
        if isinstance(repository, FetchSuccess) and repository.value.default_branch:
            return repository.value.default_branch
        return self._config.fallback_branch
