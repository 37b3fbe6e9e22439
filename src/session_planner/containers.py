"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from session_planner.adapters.supabase_element_repository import (
    SupabaseElementRepository,
)
from session_planner.adapters.supabase_identity_resolver import (
    SupabaseIdentityResolver,
)
from session_planner.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from session_planner.config import Settings
from session_planner.services.elements import ElementService
from session_planner.services.sessions import SessionService
from session_planner.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    session_service: SessionService
    element_service: ElementService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    session_repository = SupabaseSessionRepository(
        supabase_client, table_name=resolved_settings.sessions_table
    )
    element_repository = SupabaseElementRepository(
        supabase_client, table_name=resolved_settings.elements_table
    )
    user_service = UserService(SupabaseIdentityResolver(supabase_client))
    session_service = SessionService(session_repository)
    element_service = ElementService(
        element_repository=element_repository,
        session_service=session_service,
    )

    async def close_resources() -> None:
        supabase_client.postgrest.session.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        session_service=session_service,
        element_service=element_service,
        close_resources=close_resources,
    )
