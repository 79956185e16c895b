"""Service-level error taxonomy.

Services and the favorites boundary raise these; ``propman.main`` registers a
single handler that renders them as ``{"detail": ..., "kind": ...}`` with the
status code carried by the exception class.
"""


class ServiceError(Exception):
    """Base class for expected, client-facing failures."""

    status_code: int = 500
    kind: str = "internal"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """A referenced user or property does not exist."""

    status_code = 404
    kind = "not_found"


class ForbiddenError(ServiceError):
    """Role or ownership check failed."""

    status_code = 403
    kind = "forbidden"


class ConflictError(ServiceError):
    """Uniqueness violation that could not be absorbed."""

    status_code = 409
    kind = "conflict"
