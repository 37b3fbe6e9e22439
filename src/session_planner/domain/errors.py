"""Errors raised by planner services."""


class PlannerError(Exception):
    """Base class for planner failures surfaced to callers."""


class UnauthenticatedError(PlannerError):
    """Raised when the caller identity cannot be resolved."""

    def __init__(self) -> None:
        super().__init__("Not authenticated")


class NotFoundError(PlannerError):
    """Raised when a referenced session or element does not exist."""

    def __init__(self, kind: str, record_id: object) -> None:
        super().__init__(f"{kind} not found: {record_id}")
        self.kind = kind
        self.record_id = record_id


class InvalidInputError(PlannerError):
    """Raised when an argument fails a presence, type or range check."""


class ConflictError(PlannerError):
    """Raised when a session changed between reading it and writing to it."""
