"""Application constants.

Response messages and the wording of candidate validation errors.
"""

# ---------------------------------------------------------------------------
# Response messages
# ---------------------------------------------------------------------------
MESSAGE_SUCCESS: str = "success"
MESSAGE_CREATED: str = "success, candidate created"
MESSAGE_DELETED: str = "successfully deleted"
MESSAGE_MALFORMED_JSON: str = "Malformed JSON body"

# ---------------------------------------------------------------------------
# Validation wording: "Invalid <field>: expected <kind>."
# ---------------------------------------------------------------------------
CANDIDATE_FIELD_KINDS: dict[str, str] = {
    "first_name": "text",
    "last_name": "text",
    "industry_connected": "a boolean-like value",
    "party_id": "an integer",
}
