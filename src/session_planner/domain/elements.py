"""Domain models and ordering rules for session elements."""

from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ElementRecord:
    """Represents a time-boxed agenda item within a session."""

    id: UUID
    session_id: UUID
    title: str
    time: float
    notes: str
    order: int


def sum_time(
    elements: Iterable[ElementRecord],
    override_id: UUID | None = None,
    override_time: float | None = None,
) -> float:
    """Sum element times, substituting ``override_time`` for ``override_id``."""
    total = 0.0
    for element in elements:
        if override_id is not None and element.id == override_id:
            total += override_time if override_time is not None else element.time
        else:
            total += element.time
    return total


def compute_order_shifts(
    elements: Iterable[ElementRecord], old_order: int, new_order: int
) -> dict[UUID, int]:
    """Return the new order of every sibling displaced by a single-slot move.

    Moving later shifts the elements in ``(old_order, new_order]`` one slot
    earlier; moving earlier shifts ``[new_order, old_order)`` one slot later.
    The moved element itself is not included in the result.
    """
    shifts: dict[UUID, int] = {}
    if old_order == new_order:
        return shifts
    for element in elements:
        if old_order < new_order:
            if old_order < element.order <= new_order:
                shifts[element.id] = element.order - 1
        elif new_order <= element.order < old_order:
            shifts[element.id] = element.order + 1
    return shifts


def sort_by_order(elements: Iterable[ElementRecord]) -> list[ElementRecord]:
    """Return elements sorted by their position."""
    return sorted(elements, key=lambda element: element.order)

