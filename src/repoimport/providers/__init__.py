"""Repository source implementations and factory."""

from repoimport.providers.factory import create_source
from repoimport.providers.github import GitHubSource

__all__ = ["GitHubSource", "create_source"]
