"""Translation of domain errors into HTTP responses."""

from collections.abc import Iterator
from contextlib import contextmanager

import logfire
from fastapi import HTTPException, status

from civicfix.domain.error import (
    AlreadyAssignedError,
    AlreadyVotedError,
    DomainError,
    InvalidTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

# Checked in order, first match wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (AlreadyAssignedError, status.HTTP_409_CONFLICT),
    (AlreadyVotedError, status.HTTP_409_CONFLICT),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error, keeping its message as the detail."""
    return HTTPException(status_code=status_for(error), detail=str(error))


@contextmanager
def domain_errors(operation: str) -> Iterator[None]:
    """Map errors raised inside the block to HTTP responses.

    Domain errors and ``ValueError`` (including pydantic validation) become
    4xx responses. Anything else is logged and re-raised so the request's
    transaction rolls back and the server answers 500.
    """
    try:
        yield
    except HTTPException:
        raise
    except DomainError as e:
        logfire.warn(f"{operation} rejected", error=str(e), error_type=type(e).__name__)
        raise to_http_exception(e) from e
    except ValueError as e:
        logfire.warn(f"{operation} validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except Exception as e:
        logfire.error(f"Unexpected error during {operation}", error=str(e))
        raise
