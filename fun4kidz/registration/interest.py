"""Quick "registration interest" form from the home page."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fun4kidz.registration.catalog import PROGRAM_IDS
from fun4kidz.registration.schema import EMAIL_REGEX, FieldError, ValidationResult, matches
from fun4kidz.registration.submission import (
    GENERIC_FAILURE_MESSAGE,
    SubmissionError,
    SubmissionResult,
)

logger = logging.getLogger(__name__)

MIN_CHILD_AGE = 1
MAX_CHILD_AGE = 18

_email_check = matches(EMAIL_REGEX, "Please enter a valid email address")


def clean_interest(data: Dict[str, Any]) -> Dict[str, Any]:
    data = data or {}
    return {
        "name": str(data.get("name") or "").strip(),
        "child_age": str(data.get("child_age") or "").strip(),
        "email": str(data.get("email") or "").strip().lower(),
        "program": str(data.get("program") or "").strip(),
    }


def validate_interest(cleaned: Dict[str, Any]) -> ValidationResult:
    result = ValidationResult()

    if not cleaned["name"]:
        result.errors.append(FieldError("name", "Name is required"))

    message = _email_check(cleaned["email"])
    if message:
        result.errors.append(FieldError("email", message))

    age = cleaned["child_age"]
    if age:
        try:
            value = int(age)
        except ValueError:
            value = None
        if value is None or value < MIN_CHILD_AGE or value > MAX_CHILD_AGE:
            result.errors.append(
                FieldError("child_age", f"Child's age must be a whole number between {MIN_CHILD_AGE} and {MAX_CHILD_AGE}")
            )

    if cleaned["program"] and cleaned["program"] not in PROGRAM_IDS:
        result.errors.append(FieldError("program", "Please select a program from the list"))

    return result


def submit_interest(cleaned: Dict[str, Any], submitter) -> SubmissionResult:
    """Forward to the collaborator. Any failure becomes one generic message."""
    try:
        result = submitter.submit(cleaned)
    except SubmissionError:
        logger.exception("Interest submission failed")
        return SubmissionResult(ok=False, message=GENERIC_FAILURE_MESSAGE)
    if not result.ok:
        return SubmissionResult(ok=False, message=GENERIC_FAILURE_MESSAGE)
    return result
