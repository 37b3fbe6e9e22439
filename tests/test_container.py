"""Tests for container wiring."""

import asyncio

from session_planner.adapters.supabase_element_repository import (
    SupabaseElementRepository,
)
from session_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.session_service is not None
    assert isinstance(
        container.element_service.element_repository, SupabaseElementRepository
    )
    assert container.element_service.element_repository.table_name == (
        "planner_elements"
    )
    asyncio.run(container.close_resources())


def test_close_resources_closes_http_session(settings) -> None:
    container = build_container(settings)
    client = container.element_service.element_repository.client

    asyncio.run(container.close_resources())

    assert client.postgrest.session.is_closed
