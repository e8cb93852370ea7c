"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from realmhub.application.use_cases.social import (
    DuplicateActionError,
    InvalidActionError,
    ResourceNotFoundError,
)

_STATUS_BY_ERROR: tuple[tuple[type[ValueError], int], ...] = (
    (ResourceNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateActionError, status.HTTP_409_CONFLICT),
    (InvalidActionError, status.HTTP_400_BAD_REQUEST),
)


def http_error_for(exc: ValueError) -> HTTPException:
    """Translate a use case error into the matching ``HTTPException``."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def pagination_offset(page: int, limit: int) -> int:
    """Return the number of rows to skip for a one-based ``page``."""

    return (page - 1) * limit
