"""Repository and mapped-project models.

Raw models mirror the subset of the hosting API payloads the import consumes.
Mapped models are the normalized, form-ready output of an import run and
serialize with the camelCase keys the project form expects.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# ------------------------------------------------------------------
# Raw hosting-API shapes
# ------------------------------------------------------------------


class RepositoryReference(BaseModel):
    """Owner/name pair identifying a hosted repository."""

    owner: str = Field(min_length=1)
    repository_name: str = Field(min_length=1)

    model_config = {"frozen": True}

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repository_name}"


class RepositoryMetadata(BaseModel):
    """Repository object returned by the hosting API."""

    name: str
    description: str | None = None
    html_url: str
    default_branch: str

    model_config = {"frozen": True, "extra": "ignore"}


class Contributor(BaseModel):
    """One entry of the repository contributors listing."""

    login: str

    model_config = {"frozen": True, "extra": "ignore"}


# ------------------------------------------------------------------
# Mapped (form-ready) shapes
# ------------------------------------------------------------------


class _FormModel(BaseModel):
    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class MappedCollaborator(_FormModel):
    """Collaborator to pre-fill; ``id`` stays ``None`` until the project is saved."""

    id: int | None = None
    full_name: str
    role: str


class MappedProject(_FormModel):
    """Normalized project produced by one import run."""

    name: str = ""
    description: str = ""
    """README rendered to HTML."""
    short_description: str = ""
    uri: str = ""
    collaborators: tuple[MappedCollaborator, ...] = ()

    def to_form_values(self) -> dict[str, Any]:
        """Return the camelCase payload used to fill the new-project form."""
        return self.model_dump(mode="json", by_alias=True)
