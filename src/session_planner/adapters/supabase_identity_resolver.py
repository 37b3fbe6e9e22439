"""Supabase Auth identity resolver."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthApiError, Client

from session_planner.services.users import IdentityResolver

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityResolver(IdentityResolver):
    """Resolves Supabase access tokens to user ids."""

    client: Client

    def resolve_user(self, access_token: str) -> UUID | None:
        """Return the Supabase user id for a JWT, if the token is valid."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError as exc:
            _logger.info("Rejected access token: %s", exc.message)
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
