"""Element operations that keep ordering and session totals consistent."""

import logging
from dataclasses import dataclass
from typing import Literal, Protocol
from uuid import UUID

from session_planner.domain.elements import (
    ElementRecord,
    compute_order_shifts,
    sort_by_order,
    sum_time,
)
from session_planner.domain.errors import InvalidInputError, NotFoundError
from session_planner.services.sessions import SessionService

_logger = logging.getLogger(__name__)

MoveDirection = Literal["up", "down"]


class ElementRepository(Protocol):
    """Persistence interface for session elements.

    Each write method is applied as a single transaction and raises
    ``ConflictError`` when the session no longer matches what was read.
    """

    def get_element(self, element_id: UUID) -> ElementRecord | None:
        """Return an element by id, if present."""

    def list_elements(self, session_id: UUID) -> list[ElementRecord]:
        """Return all elements of a session."""

    def insert_element(  # noqa: PLR0913
        self,
        session_id: UUID,
        title: str,
        time: float,
        notes: str,
        order: int,
        total_time: float,
    ) -> ElementRecord:
        """Insert an element at ``order`` and store the session total."""

    def update_element(  # noqa: PLR0913
        self,
        element_id: UUID,
        title: str,
        time: float,
        notes: str,
        total_time: float,
    ) -> ElementRecord:
        """Overwrite the mutable fields of an element and store the session total."""

    def apply_orders(
        self,
        session_id: UUID,
        expected: dict[UUID, int],
        orders: dict[UUID, int],
    ) -> None:
        """Store new positions, given the positions every element had when read."""


@dataclass
class ElementService:
    """Application service for element mutations and session totals."""

    element_repository: ElementRepository
    session_service: SessionService

    def list_elements(self, session_id: UUID) -> list[ElementRecord]:
        """Return the elements of a session sorted by position."""
        return sort_by_order(self.element_repository.list_elements(session_id))

    def get_element(self, element_id: UUID) -> ElementRecord:
        """Return an element or raise when it does not exist."""
        element = self.element_repository.get_element(element_id)
        if element is None:
            raise NotFoundError("Element", element_id)
        return element

    def add_element(
        self, session_id: UUID, title: str, time: float, notes: str
    ) -> ElementRecord:
        """Append an element to a session and refresh its total time."""
        _validate_fields(title, time, notes)
        self.session_service.get_session(session_id)
        existing = self.element_repository.list_elements(session_id)
        element = self.element_repository.insert_element(
            session_id=session_id,
            title=title,
            time=time,
            notes=notes,
            order=len(existing),
            total_time=sum_time(existing) + time,
        )
        _logger.info(
            "Element added: session_id=%s element_id=%s order=%s",
            session_id,
            element.id,
            element.order,
        )
        return element

    def update_element(
        self, element_id: UUID, title: str, time: float, notes: str
    ) -> ElementRecord:
        """Overwrite title, time and notes and refresh the session total."""
        _validate_fields(title, time, notes)
        current = self.get_element(element_id)
        siblings = self.element_repository.list_elements(current.session_id)
        return self.element_repository.update_element(
            element_id,
            title=title,
            time=time,
            notes=notes,
            total_time=sum_time(siblings, override_id=element_id, override_time=time),
        )

    def reorder_element(self, element_id: UUID, new_order: int) -> None:
        """Move an element to ``new_order``, shifting its siblings by one."""
        if isinstance(new_order, bool) or not isinstance(new_order, int):
            raise InvalidInputError("new_order must be an integer")
        element = self.get_element(element_id)
        siblings = self.element_repository.list_elements(element.session_id)
        if not 0 <= new_order < len(siblings):
            _logger.warning(
                "Rejected reorder: element_id=%s new_order=%s count=%s",
                element_id,
                new_order,
                len(siblings),
            )
            raise InvalidInputError(
                f"new_order must be between 0 and {len(siblings) - 1}"
            )
        orders = compute_order_shifts(siblings, element.order, new_order)
        orders[element_id] = new_order
        self.element_repository.apply_orders(
            element.session_id,
            expected={sibling.id: sibling.order for sibling in siblings},
            orders=orders,
        )
        _logger.info(
            "Element reordered: element_id=%s from=%s to=%s shifted=%s",
            element_id,
            element.order,
            new_order,
            len(orders) - 1,
        )

    def move_element(
        self, element_id: UUID, direction: MoveDirection
    ) -> list[ElementRecord]:
        """Move an element one slot up or down, ignoring moves past the ends."""
        if direction not in ("up", "down"):
            raise InvalidInputError("direction must be 'up' or 'down'")
        element = self.get_element(element_id)
        siblings = self.element_repository.list_elements(element.session_id)
        new_order = element.order - 1 if direction == "up" else element.order + 1
        if 0 <= new_order < len(siblings):
            self.reorder_element(element_id, new_order)
        return self.list_elements(element.session_id)


def _validate_fields(title: str, time: float, notes: str) -> None:
    """Check presence and type of the caller-supplied element fields."""
    if not isinstance(title, str):
        raise InvalidInputError("title must be a string")
    if isinstance(time, bool) or not isinstance(time, int | float):
        raise InvalidInputError("time must be a number")
    if not isinstance(notes, str):
        raise InvalidInputError("notes must be a string")
