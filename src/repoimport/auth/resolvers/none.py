"""Anonymous access resolver."""

from __future__ import annotations

from repoimport.auth.base import TokenResolver


class NoTokenResolver(TokenResolver):
    """Resolves no token; requests go out unauthenticated and share the anonymous rate limit."""

    async def resolve(self) -> None:
        return None
