from __future__ import annotations

import logging

from flask import Blueprint, current_app

from fun4kidz.app.common.errors import abort_json, abort_validation
from fun4kidz.app.common.validation import get_json, list_of_strings
from fun4kidz.app.extensions import registration_submitter
from fun4kidz.registration import view
from fun4kidz.registration.form import RegistrationForm, recompute_amount, set_membership_only
from fun4kidz.registration.formatting import format_card_number, format_expiry
from fun4kidz.registration.pricing import quote
from fun4kidz.registration.schema import FieldError, ValidationResult, check_shape, validate_registration

logger = logging.getLogger(__name__)

bp = Blueprint("registration", __name__)


def _timings() -> view.Timings:
    return view.Timings(
        reset_seconds=current_app.config["SUCCESS_RESET_SECONDS"],
        notice_seconds=current_app.config["SUCCESS_NOTICE_SECONDS"],
    )


def form_from_json(data) -> RegistrationForm:
    """Reject wrongly typed parts, then build the form.

    Membership only wins over a program list sent alongside it.
    """
    shape = check_shape(data)
    if not shape.ok:
        abort_validation(shape)
    form = RegistrationForm.from_dict(data)
    if form.program.membership_only:
        form = set_membership_only(form, True)
    return form


def _is_child(value) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, dict) and isinstance(value.get("full_name") or "", str)


@bp.post("/registration/quote")
def quote_registration():
    """POST /api/registration/quote - total and itemized breakdown.

    Body: {"selected_programs": [...], "membership_only": false,
           "children": [{"full_name": "..."}]}
    """
    data = get_json()
    selected = list_of_strings(data, "selected_programs")
    children = data.get("children") or []
    if not isinstance(children, list) or not all(_is_child(c) for c in children):
        abort_json(400, "validation_error", "'children' must be a list of names or {\"full_name\": ...} objects")
    membership_only = data.get("membership_only", False)
    if not isinstance(membership_only, bool):
        abort_json(400, "validation_error", "'membership_only' must be true or false")

    q = quote(selected, membership_only, children)
    return q.to_dict(), 200


@bp.post("/registration/validate")
def validate_form():
    """Check a full registration without submitting it.

    The amount is recomputed from the selection first, exactly as on submit.
    """
    form = recompute_amount(form_from_json(get_json()))
    return validate_registration(form).to_dict(), 200


@bp.post("/registrations")
def create_registration():
    data = get_json()
    state = view.ViewState(form=form_from_json(data))
    state = view.submit(state, registration_submitter(), _timings())

    if state.errors:
        abort_validation(ValidationResult(errors=list(state.errors)))
    if state.phase is not view.Phase.SUCCESS:
        logger.warning("Registration submission failed: %s", state.submit_error)
        abort_json(502, "submission_failed", state.submit_error or "Submission failed")

    return {
        "message": state.success_message,
        "amount": state.form.payment.amount,
        "quote": state.quote.to_dict(),
    }, 201


@bp.post("/registration/format")
def format_inputs():
    """Format card number / expiry the way the form does while typing."""
    data = get_json()
    out = {}
    errors = []
    for key, fn in (("card_number", format_card_number), ("expiry", format_expiry)):
        if key not in data:
            continue
        if not isinstance(data[key], str):
            errors.append(FieldError(key, f"'{key}' must be a string"))
            continue
        out[key] = fn(data[key])
    if errors:
        abort_validation(ValidationResult(errors=errors))
    return out, 200
