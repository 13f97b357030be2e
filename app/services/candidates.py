"""Candidate persistence operations.

Each function issues one parameterized statement through the injected
``Database`` handle.  ``DatabaseError`` propagates to the caller; the routers
decide which status code it maps to.
"""

from __future__ import annotations

import logging

from app.db.sqlite import Database
from app.models.candidate import Candidate, CandidateCreate

logger = logging.getLogger(__name__)

_SELECT_CANDIDATES = """
    SELECT candidates.id,
           candidates.first_name,
           candidates.last_name,
           candidates.industry_connected,
           candidates.party_id,
           parties.name AS party_name
    FROM candidates
    LEFT JOIN parties ON candidates.party_id = parties.id
"""

_INSERT_CANDIDATE = """
    INSERT INTO candidates (first_name, last_name, industry_connected, party_id)
    VALUES (?, ?, ?, ?)
"""

_DELETE_CANDIDATE = "DELETE FROM candidates WHERE id = ?"


def list_candidates(db: Database) -> list[Candidate]:
    """Return every candidate joined with its party name, ordered by id."""
    rows = db.query_all(_SELECT_CANDIDATES + " ORDER BY candidates.id", [])
    return [Candidate(**row) for row in rows]


def get_candidate(db: Database, candidate_id: str) -> Candidate | None:
    """Return one candidate, or ``None`` when no row has *candidate_id*.

    The id is bound as received; SQLite's integer affinity on
    ``candidates.id`` makes ``"5"`` match row 5.
    """
    row = db.query_one(_SELECT_CANDIDATES + " WHERE candidates.id = ?", [candidate_id])
    return Candidate(**row) if row is not None else None


def delete_candidate(db: Database, candidate_id: str) -> int:
    """Delete by id and return the number of rows removed (0 or 1)."""
    result = db.execute(_DELETE_CANDIDATE, [candidate_id])
    logger.info(
        "candidate_deleted",
        extra={"candidate_id": candidate_id, "changes": result.changes},
    )
    return result.changes


def create_candidate(db: Database, candidate: CandidateCreate) -> int:
    """Insert *candidate* and return the id SQLite assigned to it."""
    result = db.execute(
        _INSERT_CANDIDATE,
        [
            candidate.first_name,
            candidate.last_name,
            int(candidate.industry_connected),
            candidate.party_id,
        ],
    )
    logger.info("candidate_created", extra={"candidate_id": result.last_id})
    return result.last_id
