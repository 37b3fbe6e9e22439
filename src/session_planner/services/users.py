"""Caller identity resolution."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


class IdentityResolver(Protocol):
    """Resolves an access token to the authenticated user id."""

    def resolve_user(self, access_token: str) -> UUID | None:
        """Return the user id for a token, or None when it is not valid."""


@dataclass
class UserService:
    """Application service for looking up the current user."""

    resolver: IdentityResolver

    def current_user(self, access_token: str | None) -> UUID | None:
        """Return the user behind the access token, if any."""
        if not access_token:
            return None
        return self.resolver.resolve_user(access_token)
