"""Import run result contract."""

from __future__ import annotations

from pydantic import BaseModel

from repoimport.contracts.project import MappedProject, RepositoryReference
from repoimport.contracts.result import FetchFailure


class ImportResult(BaseModel):
    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    reference: RepositoryReference
    project: MappedProject
    failures: tuple[FetchFailure, ...] = ()

    @property
    def degraded(self) -> bool:
        """True when at least one fetch failed and the project holds partial data."""
        return bool(self.failures)
