"""GitHub repository source."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import TypeVar

import httpx

from repoimport.contracts.config import ImporterConfig
from repoimport.contracts.exceptions import ProviderError
from repoimport.contracts.project import Contributor, RepositoryMetadata, RepositoryReference
from repoimport.contracts.result import FetchFailure, FetchResult, FetchSuccess
from repoimport.contracts.source import RepositorySource
from repoimport.providers.github.mapper import parse_repository_url, to_contributors, to_repository_metadata

_LOG = logging.getLogger(__name__)

T = TypeVar("T")

_USER_AGENT = "repoimport"


class GitHubSource(RepositorySource):
    """Reads repository metadata, README and contributors from GitHub.

    Each fetch is a single request with no retries. Any transport error, HTTP
    error status or unexpected payload is returned as a :class:`FetchFailure`
    so one failing request never aborts the others.
    """

    def __init__(
        self,
        *,
        config: ImporterConfig | None = None,
        token: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or ImporterConfig()
        self._token = token
        self._client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> GitHubSource:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": _USER_AGENT},
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
                timeout=httpx.Timeout(self._config.timeout_seconds),
            )
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def parse_reference(self, url: str) -> RepositoryReference:
        return parse_repository_url(url, self._config.url_fragments)

    async def fetch_repository(self, reference: RepositoryReference) -> FetchResult[RepositoryMetadata]:
        self._require_client()
        url = f"{self._api_base}/repos/{reference.owner}/{reference.repository_name}"

        async def _fetch() -> RepositoryMetadata:
            response = await self._get(url, headers=self._api_headers())
            return to_repository_metadata(response.json())

        return await self._capture("fetch_repository", _fetch)

    async def fetch_readme(self, reference: RepositoryReference, branch: str) -> FetchResult[str]:
        self._require_client()
        url = (
            f"{self._config.raw_content_base_url.rstrip('/')}/{reference.owner}/{reference.repository_name}"
            f"/{branch}/{self._config.readme_filename}"
        )

        async def _fetch() -> str:
            response = await self._get(url, headers=self._auth_headers())
            return response.text

        return await self._capture("fetch_readme", _fetch)

    async def fetch_contributors(self, reference: RepositoryReference) -> FetchResult[list[Contributor]]:
        self._require_client()
        url = f"{self._api_base}/repos/{reference.owner}/{reference.repository_name}/contributors"

        async def _fetch() -> list[Contributor]:
            response = await self._get(url, headers=self._api_headers())
            # Empty repositories answer 204 with no body.
            if response.status_code == 204 or not response.content.strip():
                return []
            return to_contributors(response.json())

        return await self._capture("fetch_contributors", _fetch)

    @property
    def _api_base(self) -> str:
        return self._config.api_base_url.rstrip("/")

    def _auth_headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    def _api_headers(self) -> dict[str, str]:
        return {"Accept": "application/vnd.github+json", **self._auth_headers()}

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise ProviderError("Source is not initialized. Use 'async with'.")
        return self._client

    async def _get(self, url: str, *, headers: dict[str, str]) -> httpx.Response:
        client = self._require_client()
        _LOG.debug("GET %s", url)
        response = await client.get(url, headers=headers)
        response.raise_for_status()
        return response

    @staticmethod
    async def _capture(operation: str, fn: Callable[[], Awaitable[T]]) -> FetchResult[T]:
        try:
            return FetchSuccess(await fn())
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, ProviderError) as exc:
            _LOG.warning("%s failed: %s", operation, exc)
            return FetchFailure(operation=operation, error=exc)
