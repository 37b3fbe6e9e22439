"""Owner-scoped session operations."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from session_planner.domain.errors import (
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
)
from session_planner.domain.sessions import SessionRecord, matches_search

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for planning sessions."""

    def create_session(self, owner_id: UUID, title: str) -> SessionRecord:
        """Create a session with zero total time and return it."""

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        """Return a session by id, if present."""

    def list_sessions(self, owner_id: UUID) -> list[SessionRecord]:
        """Return every session owned by the user."""


@dataclass
class SessionService:
    """Application service for session listing and creation."""

    repository: SessionRepository

    def list_sessions(
        self, owner_id: UUID | None, search: str | None = None
    ) -> list[SessionRecord]:
        """Return the owner's sessions, filtered by title when searching."""
        if owner_id is None:
            raise UnauthenticatedError
        sessions = self.repository.list_sessions(owner_id)
        return [session for session in sessions if matches_search(session, search)]

    def create_session(self, owner_id: UUID | None, title: str) -> SessionRecord:
        """Create an empty session for the owner."""
        if owner_id is None:
            raise UnauthenticatedError
        if not isinstance(title, str):
            raise InvalidInputError("title must be a string")
        session = self.repository.create_session(owner_id, title)
        _logger.info("Session created: session_id=%s owner=%s", session.id, owner_id)
        return session

    def get_session(self, session_id: UUID) -> SessionRecord:
        """Return a session or raise when it does not exist."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        return session

    def get_owned_session(
        self, owner_id: UUID | None, session_id: UUID
    ) -> SessionRecord:
        """Return a session the caller owns, hiding sessions of other owners."""
        if owner_id is None:
            raise UnauthenticatedError
        session = self.get_session(session_id)
        if session.owner_id != owner_id:
            raise NotFoundError("Session", session_id)
        return session
