"""Pydantic models for planner request and response payloads."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from session_planner.domain.elements import ElementRecord
from session_planner.domain.sessions import SessionRecord


class CreateSessionRequest(BaseModel):
    """Body for creating a session."""

    title: str


class ElementFieldsRequest(BaseModel):
    """Body for adding or updating an element."""

    title: str
    time: float
    notes: str = ""


class ReorderRequest(BaseModel):
    """Body for moving an element to an explicit position."""

    new_order: int


class MoveRequest(BaseModel):
    """Body for moving an element one slot."""

    direction: Literal["up", "down"]


class SessionResponse(BaseModel):
    """Session as returned to clients."""

    id: UUID
    owner_id: UUID
    title: str
    total_time: float

    @classmethod
    def from_record(cls, record: SessionRecord) -> "SessionResponse":
        return cls(
            id=record.id,
            owner_id=record.owner_id,
            title=record.title,
            total_time=record.total_time,
        )


class ElementResponse(BaseModel):
    """Element as returned to clients."""

    id: UUID
    session_id: UUID
    title: str
    time: float
    notes: str
    order: int

    @classmethod
    def from_record(cls, record: ElementRecord) -> "ElementResponse":
        return cls(
            id=record.id,
            session_id=record.session_id,
            title=record.title,
            time=record.time,
            notes=record.notes,
            order=record.order,
        )
