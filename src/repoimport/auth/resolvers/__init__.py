"""Concrete token resolvers."""

from repoimport.auth.resolvers.env import EnvTokenResolver
from repoimport.auth.resolvers.none import NoTokenResolver
from repoimport.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "NoTokenResolver", "StaticTokenResolver"]
