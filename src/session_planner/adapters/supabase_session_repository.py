"""Supabase-backed session repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from session_planner.domain.sessions import SessionRecord
from session_planner.services.sessions import SessionRepository

_COLUMNS = "id, owner_id, title, total_time"


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for planning sessions."""

    client: Client
    table_name: str = "planner_sessions"

    def create_session(self, owner_id: UUID, title: str) -> SessionRecord:
        """Create a session row and return it."""
        response = (
            self.client.table(self.table_name)
            .insert({"owner_id": str(owner_id), "title": title, "total_time": 0})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create session")
        return _parse_session(response.data[0])

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        """Return a session by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("id", str(session_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def list_sessions(self, owner_id: UUID) -> list[SessionRecord]:
        """Return all sessions for an owner."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("owner_id", str(owner_id))
            .execute()
        )
        return [_parse_session(row) for row in response.data or []]


def _parse_session(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["owner_id"])),
        title=str(row.get("title", "")),
        total_time=float(row.get("total_time") or 0),
    )
