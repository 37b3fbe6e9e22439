"""Supabase-backed element repository.

Writes go through the SQL functions in ``supabase/migrations`` so that each
mutation and its session total commit in one transaction.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from session_planner.domain.elements import ElementRecord
from session_planner.domain.errors import ConflictError, NotFoundError
from session_planner.services.elements import ElementRepository

_COLUMNS = "id, session_id, title, time, notes, sort_order"
_SERIALIZATION_FAILURE = "40001"
_NO_DATA_FOUND = "P0002"

T = TypeVar("T")


@dataclass
class SupabaseElementRepository(ElementRepository):
    """Supabase implementation for session elements."""

    client: Client
    table_name: str = "planner_elements"

    def get_element(self, element_id: UUID) -> ElementRecord | None:
        """Return an element by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("id", str(element_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_element(response.data[0])

    def list_elements(self, session_id: UUID) -> list[ElementRecord]:
        """Return the elements of a session ordered by position."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("session_id", str(session_id))
            .order("sort_order")
            .execute()
        )
        return [_parse_element(row) for row in response.data or []]

    def insert_element(  # noqa: PLR0913
        self,
        session_id: UUID,
        title: str,
        time: float,
        notes: str,
        order: int,
        total_time: float,
    ) -> ElementRecord:
        """Insert an element and store the session total in one call."""
        response = _call(
            "Session",
            session_id,
            self.client.rpc(
                "add_planner_element",
                {
                    "p_session_id": str(session_id),
                    "p_title": title,
                    "p_time": time,
                    "p_notes": notes,
                    "p_sort_order": order,
                    "p_total_time": total_time,
                },
            ).execute,
        )
        if not response.data:
            raise RuntimeError("Failed to create element")
        return _parse_element(response.data[0])

    def update_element(  # noqa: PLR0913
        self,
        element_id: UUID,
        title: str,
        time: float,
        notes: str,
        total_time: float,
    ) -> ElementRecord:
        """Overwrite title, time and notes and store the session total."""
        response = _call(
            "Element",
            element_id,
            self.client.rpc(
                "update_planner_element",
                {
                    "p_element_id": str(element_id),
                    "p_title": title,
                    "p_time": time,
                    "p_notes": notes,
                    "p_total_time": total_time,
                },
            ).execute,
        )
        if not response.data:
            raise RuntimeError("Failed to update element")
        return _parse_element(response.data[0])

    def apply_orders(
        self,
        session_id: UUID,
        expected: dict[UUID, int],
        orders: dict[UUID, int],
    ) -> None:
        """Store new positions for a session in one call."""
        _call(
            "Session",
            session_id,
            self.client.rpc(
                "reorder_planner_element",
                {
                    "p_session_id": str(session_id),
                    "p_expected": {str(key): value for key, value in expected.items()},
                    "p_orders": {str(key): value for key, value in orders.items()},
                },
            ).execute,
        )


def _call(kind: str, record_id: UUID, execute: Callable[[], T]) -> T:
    """Run an RPC, translating the SQL functions' error codes."""
    try:
        return execute()
    except APIError as exc:
        if exc.code == _NO_DATA_FOUND:
            raise NotFoundError(kind, record_id) from exc
        if exc.code == _SERIALIZATION_FAILURE:
            raise ConflictError(exc.message or "Session changed concurrently") from exc
        raise


def _parse_element(row: dict[str, object]) -> ElementRecord:
    """Parse an element row into a domain model."""
    return ElementRecord(
        id=UUID(str(row["id"])),
        session_id=UUID(str(row["session_id"])),
        title=str(row.get("title", "")),
        time=float(row.get("time") or 0),
        notes=str(row.get("notes") or ""),
        order=int(row.get("sort_order", 0)),
    )
