"""Repository source contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from repoimport.contracts.project import Contributor, RepositoryMetadata, RepositoryReference
from repoimport.contracts.result import FetchResult


class RepositorySource(ABC):
    """Read-only access to one repository-hosting service.

    Implementations are async context managers. Fetch methods never raise for
    remote failures; they return :class:`~repoimport.contracts.result.FetchFailure`.
    """

    @abstractmethod
    async def __aenter__(self) -> RepositorySource: ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    @abstractmethod
    def parse_reference(self, url: str) -> RepositoryReference:
        """Decompose *url* into a reference, raising ``RepositoryURLError`` when it cannot."""

    @abstractmethod
    async def fetch_repository(self, reference: RepositoryReference) -> FetchResult[RepositoryMetadata]: ...

    @abstractmethod
    async def fetch_readme(self, reference: RepositoryReference, branch: str) -> FetchResult[str]: ...

    @abstractmethod
    async def fetch_contributors(self, reference: RepositoryReference) -> FetchResult[list[Contributor]]: ...
