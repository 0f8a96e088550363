"""Auth module public exports."""

from repoimport.auth.base import TokenResolver
from repoimport.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
