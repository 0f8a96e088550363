"""Normalization of fetch results into a mapped project."""

from __future__ import annotations

from repoimport.contracts.config import DEFAULT_ROLE
from repoimport.contracts.project import Contributor, MappedCollaborator, MappedProject, RepositoryMetadata
from repoimport.contracts.renderer import DescriptionRenderer
from repoimport.contracts.result import FetchResult, FetchSuccess, value_or


def map_collaborators(
    contributors: FetchResult[list[Contributor]],
    *,
    default_role: str = DEFAULT_ROLE,
) -> tuple[MappedCollaborator, ...]:
    """Map contributors to unsaved collaborators; a failed fetch maps to none."""
    return tuple(
        MappedCollaborator(id=None, full_name=contributor.login, role=default_role)
        for contributor in value_or(contributors, [])
    )


def map_project(
    repository: FetchResult[RepositoryMetadata],
    readme: FetchResult[str],
    contributors: FetchResult[list[Contributor]],
    *,
    renderer: DescriptionRenderer,
    default_role: str = DEFAULT_ROLE,
) -> MappedProject:
    """Combine the three fetch results into one :class:`MappedProject`.

    Failed fetches leave their fields empty; this function never raises for
    degraded input.
    """
    name = short_description = uri = ""
    if isinstance(repository, FetchSuccess):
        metadata = repository.value
        name = metadata.name
        short_description = metadata.description or ""
        uri = metadata.html_url

    readme_text = value_or(readme, "")
    description = renderer.render(readme_text) if readme_text else ""

    return MappedProject(
        name=name,
        description=description,
        short_description=short_description,
        uri=uri,
        collaborators=map_collaborators(contributors, default_role=default_role),
    )
