"""Domain models for planning sessions."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted planning session."""

    id: UUID
    owner_id: UUID
    title: str
    total_time: float


def matches_search(session: SessionRecord, search: str | None) -> bool:
    """Return True when the title contains the search text, ignoring case."""
    if not search:
        return True
    return search.lower() in session.title.lower()
