"""Candidate CRUD endpoints.

GET    /api/candidates        -- all candidates joined with their party.
GET    /api/candidates/{id}   -- one candidate (200 with null data if absent).
DELETE /api/candidates/{id}   -- delete by id, reports rows changed.
POST   /api/candidates        -- validate and insert a candidate.

Database failures are returned as ``{"error": <driver message>}``: 500 for
the list endpoint, 400 for the others.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from starlette.responses import JSONResponse

from app.core.constants import (
    MESSAGE_CREATED,
    MESSAGE_DELETED,
    MESSAGE_MALFORMED_JSON,
    MESSAGE_SUCCESS,
)
from app.db.sqlite import Database, DatabaseError, get_database
from app.models.candidate import (
    CandidateCreate,
    CandidateCreatedResponse,
    CandidateDeletedResponse,
    CandidateListResponse,
    CandidateResponse,
)
from app.services.candidates import (
    create_candidate,
    delete_candidate,
    get_candidate,
    list_candidates,
)
from app.services.validation import validation_messages

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class MalformedBodyError(ValueError):
    """Raised when a JSON request body cannot be decoded."""


async def _read_body(request: Request) -> dict[str, Any]:
    """Parse a JSON or URL-encoded body into a dict.

    Bodies that decode to something other than an object are treated as
    empty so that validation reports every required field.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        return dict(form)

    if not (await request.body()).strip():
        return {}
    try:
        parsed = await request.json()
    except ValueError as exc:
        raise MalformedBodyError(MESSAGE_MALFORMED_JSON) from exc
    return parsed if isinstance(parsed, dict) else {}


def _error(status_code: int, error: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

@router.get("", response_model=CandidateListResponse)
async def read_candidates(db: Database = Depends(get_database)) -> Any:
    """Return every candidate with its ``party_name``."""
    try:
        candidates = list_candidates(db)
    except DatabaseError as exc:
        logger.error("list_candidates_failed", extra={"error_message": str(exc)})
        return _error(500, str(exc))

    return CandidateListResponse(message=MESSAGE_SUCCESS, data=candidates)


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def read_candidate(
    candidate_id: str,
    db: Database = Depends(get_database),
) -> Any:
    """Return one candidate.

    A missing id still answers 200 with ``data: null``.
    """
    try:
        candidate = get_candidate(db, candidate_id)
    except DatabaseError as exc:
        logger.error(
            "get_candidate_failed",
            extra={"candidate_id": candidate_id, "error_message": str(exc)},
        )
        return _error(400, str(exc))

    return CandidateResponse(message=MESSAGE_SUCCESS, data=candidate)


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

@router.delete("/{candidate_id}", response_model=CandidateDeletedResponse)
async def remove_candidate(
    candidate_id: str,
    db: Database = Depends(get_database),
) -> Any:
    """Delete a candidate; an unknown id reports ``changes: 0``."""
    try:
        changes = delete_candidate(db, candidate_id)
    except DatabaseError as exc:
        logger.error(
            "delete_candidate_failed",
            extra={"candidate_id": candidate_id, "error_message": str(exc)},
        )
        return _error(400, str(exc))

    return CandidateDeletedResponse(message=MESSAGE_DELETED, changes=changes)


@router.post("", response_model=CandidateCreatedResponse)
async def add_candidate(
    request: Request,
    db: Database = Depends(get_database),
) -> Any:
    """Validate the body and insert a candidate.

    Responds 400 with the list of validation messages, or with the driver
    message if the insert fails.
    """
    try:
        body = await _read_body(request)
    except MalformedBodyError as exc:
        return _error(400, str(exc))

    try:
        candidate = CandidateCreate.model_validate(body)
    except ValidationError as exc:
        errors = validation_messages(exc)
        logger.info("candidate_rejected", extra={"validation_errors": errors})
        return _error(400, errors)

    try:
        new_id = create_candidate(db, candidate)
    except DatabaseError as exc:
        logger.error("create_candidate_failed", extra={"error_message": str(exc)})
        return _error(400, str(exc))

    return CandidateCreatedResponse(message=MESSAGE_CREATED, data=body, id=new_id)
