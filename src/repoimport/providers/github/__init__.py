"""GitHub repository source."""

from repoimport.providers.github.mapper import parse_repository_url, strip_url_fragments
from repoimport.providers.github.source import GitHubSource

__all__ = ["GitHubSource", "parse_repository_url", "strip_url_fragments"]
