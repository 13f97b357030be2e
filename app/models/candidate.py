"""Pydantic models for the ``candidates`` table and its API envelopes.

``CandidateCreate`` carries the request rules: blank values count as
missing, and pydantic's lax mode turns boolean-like and numeric strings
into ``bool`` / ``int``.  ``Candidate`` is the joined read shape
(``party_name`` comes from the ``LEFT JOIN`` on ``parties``) and passes
stored values through as SQLite returns them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class CandidateCreate(BaseModel):
    """Validated payload for inserting a candidate."""
    first_name: str
    last_name: str
    industry_connected: bool
    party_id: int | None = None

    @model_validator(mode="before")
    @classmethod
    def drop_blank_fields(cls, data: Any) -> Any:
        """Null and whitespace-only values are treated as absent."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if not _is_blank(value)}
        return data


class Candidate(BaseModel):
    """Candidate row joined with its party name.

    The schema is provisioned outside this service, so column types are
    loose: a flag stored as ``'true'`` is returned as-is.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    industry_connected: int | str
    party_id: int | str | None = None
    party_name: str | None = None


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------


class CandidateListResponse(BaseModel):
    message: str
    data: list[Candidate]


class CandidateResponse(BaseModel):
    message: str
    data: Candidate | None = None


class CandidateCreatedResponse(BaseModel):
    """Echoes the request body alongside the new row id."""
    message: str
    data: dict[str, Any]
    id: int


class CandidateDeletedResponse(BaseModel):
    message: str
    changes: int
