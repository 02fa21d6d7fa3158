from __future__ import annotations


class KanbanError(RuntimeError):
    """Base class for errors raised by the repository layer."""

    status_code = 400


class NotFoundError(KanbanError):
    """Raised when a board, column or card does not exist."""

    status_code = 404


class InvalidOperationError(KanbanError):
    """Raised when a request is well-formed but cannot be applied to the current state."""

    status_code = 400
