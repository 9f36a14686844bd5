from __future__ import annotations

from flask import Blueprint

from fun4kidz.app.common.errors import abort_json, abort_validation
from fun4kidz.app.common.validation import get_json
from fun4kidz.app.extensions import interest_submitter
from fun4kidz.registration.interest import clean_interest, submit_interest, validate_interest

bp = Blueprint("interest", __name__)


@bp.post("/interest")
def create_interest():
    """POST /api/interest - quick "send me information" request."""
    cleaned = clean_interest(get_json())
    result = validate_interest(cleaned)
    if not result.ok:
        abort_validation(result)

    outcome = submit_interest(cleaned, interest_submitter())
    if not outcome.ok:
        abort_json(502, "submission_failed", outcome.message)
    return {"message": outcome.message}, 201
