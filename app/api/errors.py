"""Error responses for the REST API."""

import logging
from typing import Dict, List

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

VALIDATION_TITLE = "One or more validation errors occurred."


class RequestRejected(HTTPException):
    """Validation failure detected after the payload parsed cleanly."""

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=VALIDATION_TITLE)
        self.errors = errors


def validation_problem(errors: Dict[str, List[str]]) -> JSONResponse:
    """Build a 400 response listing messages per field."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": VALIDATION_TITLE,
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": errors,
        },
    )


def _field_name(loc: tuple) -> str:
    # loc looks like ("body", "firstName") or ("path", "student_id")
    parts = [str(part) for part in loc[1:]]
    return ".".join(parts) if parts else str(loc[0])


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report pydantic validation failures as 400 with field-level messages."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(tuple(error["loc"])), []).append(error["msg"])
    logger.warning(f"Rejected {request.method} {request.url.path}: {errors}")
    return validation_problem(errors)


async def request_rejected_handler(request: Request, exc: RequestRejected) -> JSONResponse:
    """Report controller-side validation failures."""
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors}")
    return validation_problem(exc.errors)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the API's exception handlers to the application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RequestRejected, request_rejected_handler)


async def commit_or_conflict(db: AsyncSession) -> None:
    """Commit the session, turning integrity violations into 409 responses."""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.error(f"Integrity error on commit: {e.orig}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Integrity constraint violated: {e.orig}",
        )
