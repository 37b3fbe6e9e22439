"""Planner API endpoints with bearer token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, Request, status

from session_planner.api.planner_models import (
    CreateSessionRequest,
    ElementFieldsRequest,
    ElementResponse,
    MoveRequest,
    ReorderRequest,
    SessionResponse,
)
from session_planner.config import parse_bearer_token
from session_planner.domain.elements import ElementRecord
from session_planner.domain.errors import NotFoundError, UnauthenticatedError
from session_planner.domain.sessions import SessionRecord

if TYPE_CHECKING:
    from session_planner.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["planner"])


async def current_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UUID | None:
    """Resolve the caller from the Authorization header, if possible."""
    container: AppContainer = request.app.state.container
    token = parse_bearer_token(authorization)
    user_id = container.user_service.current_user(token)
    if user_id is None:
        logger.info("Request without a resolvable user")
    return user_id


async def require_user(user_id: UUID | None = Depends(current_user)) -> UUID:
    """Ensure the route is only reachable by signed-in users."""
    if user_id is None:
        raise UnauthenticatedError
    return user_id


async def owned_session(
    session_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> SessionRecord:
    """Resolve the path session, which must belong to the caller."""
    container: AppContainer = request.app.state.container
    return container.session_service.get_owned_session(user_id, session_id)


async def owned_element(
    element_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> ElementRecord:
    """Resolve the path element, whose session must belong to the caller."""
    container: AppContainer = request.app.state.container
    element = container.element_service.get_element(element_id)
    session = container.session_service.get_session(element.session_id)
    if session.owner_id != user_id:
        raise NotFoundError("Element", element_id)
    return element


@router.get("/sessions")
async def list_sessions(
    request: Request,
    search: str | None = None,
    user_id: UUID | None = Depends(current_user),
) -> list[SessionResponse]:
    """Return the caller's sessions, optionally filtered by title."""
    container: AppContainer = request.app.state.container
    sessions = container.session_service.list_sessions(user_id, search)
    return [SessionResponse.from_record(session) for session in sessions]


@router.post("/sessions", status_code=status.HTTP_201_CREATED)
async def create_session(
    body: CreateSessionRequest,
    request: Request,
    user_id: UUID | None = Depends(current_user),
) -> SessionResponse:
    """Create an empty session owned by the caller."""
    container: AppContainer = request.app.state.container
    session = container.session_service.create_session(user_id, body.title)
    return SessionResponse.from_record(session)


@router.get(
    "/sessions/{session_id}/elements", dependencies=[Depends(owned_session)]
)
async def list_elements(session_id: UUID, request: Request) -> list[ElementResponse]:
    """Return the elements of a session in position order."""
    container: AppContainer = request.app.state.container
    elements = container.element_service.list_elements(session_id)
    return [ElementResponse.from_record(element) for element in elements]


@router.post(
    "/sessions/{session_id}/elements",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(owned_session)],
)
async def add_element(
    session_id: UUID,
    body: ElementFieldsRequest,
    request: Request,
) -> ElementResponse:
    """Append an element to the end of a session."""
    container: AppContainer = request.app.state.container
    element = container.element_service.add_element(
        session_id, title=body.title, time=body.time, notes=body.notes
    )
    return ElementResponse.from_record(element)


@router.put("/elements/{element_id}", dependencies=[Depends(owned_element)])
async def update_element(
    element_id: UUID,
    body: ElementFieldsRequest,
    request: Request,
) -> ElementResponse:
    """Overwrite the title, time and notes of an element."""
    container: AppContainer = request.app.state.container
    element = container.element_service.update_element(
        element_id, title=body.title, time=body.time, notes=body.notes
    )
    return ElementResponse.from_record(element)


@router.post(
    "/elements/{element_id}/reorder",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(owned_element)],
)
async def reorder_element(
    element_id: UUID,
    body: ReorderRequest,
    request: Request,
) -> None:
    """Move an element to an explicit position."""
    container: AppContainer = request.app.state.container
    container.element_service.reorder_element(element_id, body.new_order)


@router.post("/elements/{element_id}/move", dependencies=[Depends(owned_element)])
async def move_element(
    element_id: UUID,
    body: MoveRequest,
    request: Request,
) -> list[ElementResponse]:
    """Move an element one slot up or down and return the session's elements."""
    container: AppContainer = request.app.state.container
    elements = container.element_service.move_element(element_id, body.direction)
    return [ElementResponse.from_record(element) for element in elements]
