"""Centralized error transformation for API routes.

Maps MvcMovie errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder

from mvcmovie.domain.shared.error import (
    ConflictError,
    DomainError,
    InfrastructureError,
    InvalidMovieError,
    MissingIdentifierError,
    MvcMovieError,
    NotFoundError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    MissingIdentifierError: 400,
    ValidationError: 422,
    InvalidMovieError: 422,
    ConflictError: 409,
}


def _status_for(error: DomainError) -> int:
    for error_type in type(error).__mro__:
        if error_type in DOMAIN_ERROR_STATUS_MAP:
            return DOMAIN_ERROR_STATUS_MAP[error_type]
    return 400


def map_error(error: MvcMovieError) -> HTTPException:
    """Map an MvcMovie error to an HTTPException.

    Args:
        error: The MvcMovie error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        # Infrastructure errors → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        if isinstance(error, InvalidMovieError):
            # Field-level messages plus the submitted values for redisplay
            detail["errors"] = error.errors
            detail["input"] = jsonable_encoder(error.submitted)
        return HTTPException(status_code=_status_for(error), detail=detail)

    # Anything else (e.g. InconsistentStateError) is an internal error
    return HTTPException(status_code=500, detail=detail)
