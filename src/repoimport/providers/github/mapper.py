"""Mapping functions between GitHub URLs/API payloads and contract models."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from repoimport.contracts.config import GITHUB_URL_FRAGMENTS
from repoimport.contracts.exceptions import ProviderError, RepositoryURLError
from repoimport.contracts.project import Contributor, RepositoryMetadata, RepositoryReference


def strip_url_fragments(url: str, fragments: Sequence[str] = GITHUB_URL_FRAGMENTS) -> str:
    """Remove every occurrence of each fragment, in order.

    Fragments are removed wherever they appear, not only at the start, so a
    ``github.com/`` inside the path is dropped as well.
    """
    for fragment in fragments:
        url = url.replace(fragment, "")
    return url


def parse_repository_url(url: str, fragments: Sequence[str] = GITHUB_URL_FRAGMENTS) -> RepositoryReference:
    """Parse a GitHub repository URL into its owner and repository name.

    Accepts full URLs (``https://github.com/acme/widget``), scheme-less forms
    (``www.github.com/acme/widget``) and bare ``acme/widget`` slugs. Path
    segments after the repository name (``tree/main``, ``blob/...``) are
    ignored.

    Args:
        url: Raw URL as typed by the user.
        fragments: Ordered fragments to strip before splitting.

    Returns:
        The parsed repository reference.

    Raises:
        RepositoryURLError: If fewer than two path segments remain.
    """
    stripped = strip_url_fragments(url.strip(), fragments)
    segments = [segment for segment in stripped.split("/") if segment]
    if len(segments) < 2:
        raise RepositoryURLError(
            f"Invalid repository URL: {url!r}. Expected format: https://github.com/{{owner}}/{{repository}}",
            url=url,
        )
    return RepositoryReference(owner=segments[0], repository_name=segments[1])


def to_repository_metadata(payload: Any) -> RepositoryMetadata:
    """Build repository metadata from a ``GET /repos/{owner}/{repo}`` payload.

    Raises:
        ProviderError: If the payload lacks the consumed fields.
    """
    if not isinstance(payload, dict):
        raise ProviderError(f"Repository payload must be an object, got {type(payload).__name__}")
    try:
        return RepositoryMetadata.model_validate(payload)
    except ValidationError as exc:
        raise ProviderError(f"Malformed repository payload: {exc}") from exc


def to_contributors(payload: Any) -> list[Contributor]:
    """Build contributors from a ``GET /repos/{owner}/{repo}/contributors`` payload.

    Raises:
        ProviderError: If the payload is not a list of contributor objects.
    """
    if not isinstance(payload, list):
        raise ProviderError(f"Contributors payload must be a list, got {type(payload).__name__}")
    try:
        return [Contributor.model_validate(entry) for entry in payload]
    except ValidationError as exc:
        raise ProviderError(f"Malformed contributors payload: {exc}") from exc
