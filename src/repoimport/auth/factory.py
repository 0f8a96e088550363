"""Token resolver factory."""

from __future__ import annotations

from repoimport.auth.base import TokenResolver
from repoimport.auth.resolvers.env import EnvTokenResolver
from repoimport.auth.resolvers.none import NoTokenResolver
from repoimport.auth.resolvers.static import StaticTokenResolver
from repoimport.contracts.config import ImporterConfig
from repoimport.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "none": NoTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: ImporterConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "none":
        return NoTokenResolver()
    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
