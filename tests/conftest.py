"""Shared test fixtures for repoimport tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from repoimport.contracts.config import ImporterConfig
from repoimport.contracts.project import Contributor, RepositoryMetadata


@pytest.fixture
def sample_metadata() -> RepositoryMetadata:
    """Repository metadata as GitHub would describe ``acme/widget``."""
    return RepositoryMetadata(
        name="widget",
        description="short",
        html_url="https://x/widget",
        default_branch="main",
    )


@pytest.fixture
def sample_contributors() -> list[Contributor]:
    return [Contributor(login="alice")]


@pytest.fixture
def repository_payload() -> dict[str, Any]:
    """A trimmed ``GET /repos/acme/widget`` response body."""
    return {
        "id": 1296269,
        "name": "widget",
        "full_name": "acme/widget",
        "description": "short",
        "html_url": "https://github.com/acme/widget",
        "default_branch": "main",
        "private": False,
    }


@pytest.fixture
def sample_config() -> ImporterConfig:
    return ImporterConfig(
        api_base_url="https://api.test",
        raw_content_base_url="https://raw.test",
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "repoimport.json"
    path.write_text(
        json.dumps({"default_role": "Contributor", "timeout_seconds": 5, "auth": "env"}),
        encoding="utf-8",
    )
    return path
