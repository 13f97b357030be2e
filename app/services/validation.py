"""Translation of pydantic validation errors into API error messages.

Routes validate bodies with ``Model.model_validate`` and hand the resulting
``ValidationError`` to ``validation_messages`` to build the ``{"error": [...]}``
list.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError

from app.core.constants import CANDIDATE_FIELD_KINDS


def validation_messages(
    exc: ValidationError,
    kinds: Mapping[str, str] = CANDIDATE_FIELD_KINDS,
) -> list[str]:
    """Return one message per failing field, in model field order.

    Missing fields read ``"No <field> specified."``; anything else reads
    ``"Invalid <field>: expected <kind>."``, falling back to pydantic's own
    message for fields without a kind.
    """
    messages: list[str] = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        if error["type"] == "missing":
            messages.append(f"No {field} specified.")
        elif field in kinds:
            messages.append(f"Invalid {field}: expected {kinds[field]}.")
        else:
            messages.append(f"Invalid {field}: {error['msg']}")
    return messages
