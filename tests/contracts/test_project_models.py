"""Tests for contract models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from repoimport.contracts.config import ImporterConfig
from repoimport.contracts.import_result import ImportResult
from repoimport.contracts.project import MappedCollaborator, MappedProject, RepositoryReference
from repoimport.contracts.result import FetchFailure, FetchSuccess, value_or


def test_repository_reference_requires_non_empty_fields() -> None:
    with pytest.raises(ValidationError):
        RepositoryReference(owner="", repository_name="widget")
    with pytest.raises(ValidationError):
        RepositoryReference(owner="acme", repository_name="")


def test_repository_reference_slug() -> None:
    assert RepositoryReference(owner="acme", repository_name="widget").slug == "acme/widget"


def test_mapped_project_is_immutable() -> None:
    project = MappedProject(name="widget")

    with pytest.raises(ValidationError):
        project.name = "other"  # type: ignore[misc]


def test_form_values_use_camel_case_keys() -> None:
    project = MappedProject(
        name="widget",
        description="<p>readme</p>",
        short_description="short",
        uri="https://x/widget",
        collaborators=(MappedCollaborator(full_name="alice", role="Developer"),),
    )

    assert project.to_form_values() == {
        "name": "widget",
        "description": "<p>readme</p>",
        "shortDescription": "short",
        "uri": "https://x/widget",
        "collaborators": [{"id": None, "fullName": "alice", "role": "Developer"}],
    }


def test_mapped_project_accepts_alias_keys() -> None:
    project = MappedProject.model_validate({"shortDescription": "short", "collaborators": []})

    assert project.short_description == "short"


def test_value_or_unwraps_success_and_defaults_failure() -> None:
    assert value_or(FetchSuccess([1]), []) == [1]
    assert value_or(FetchFailure(operation="fetch_readme", error=RuntimeError("x")), "") == ""


def test_fetch_failure_message() -> None:
    failure = FetchFailure(operation="fetch_readme", error=RuntimeError("404 Not Found"))

    assert failure.message == "fetch_readme failed: 404 Not Found"


def test_import_result_degraded_flag() -> None:
    reference = RepositoryReference(owner="acme", repository_name="widget")
    failure = FetchFailure(operation="fetch_contributors", error=RuntimeError("x"))

    assert ImportResult(reference=reference, project=MappedProject()).degraded is False
    assert ImportResult(reference=reference, project=MappedProject(), failures=(failure,)).degraded is True


def test_import_result_is_frozen_and_keeps_failure_errors() -> None:
    error = RuntimeError("403 Forbidden")
    result = ImportResult(
        reference=RepositoryReference(owner="acme", repository_name="widget"),
        project=MappedProject(name="widget"),
        failures=[FetchFailure(operation="fetch_readme", error=error)],
    )

    assert isinstance(result.failures, tuple)
    assert result.failures[0].operation == "fetch_readme"
    assert result.failures[0].error is error
    with pytest.raises(ValidationError):
        result.project = MappedProject()  # type: ignore[misc]


def test_config_defaults() -> None:
    config = ImporterConfig()

    assert config.default_role == "Developer"
    assert config.fallback_branch == "HEAD"
    assert config.url_fragments == ("https://", "http://", "www.", "github.com/")
    assert config.auth == "none"


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"auth": "token"}, "token auth requires a non-empty token"),
        ({"auth": "env", "token": "tok"}, "token must be unset"),
        ({"auth": "oauth"}, "auth must be one of"),
        ({"timeout_seconds": 0}, "greater than 0"),
        ({"default_role": ""}, "at least 1 character"),
    ],
)
def test_config_validation(payload: dict[str, object], message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        ImporterConfig.model_validate(payload)
