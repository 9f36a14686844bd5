"""Registration form validation.

Every rule runs on every call so the UI can show all problems at once.
Each field reports at most one message (its first failing check); the
membership/program rule adds one more against the selection field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from fun4kidz.registration.catalog import CARD_TYPES, PROGRAM_IDS, US_STATES
from fun4kidz.registration.form import RegistrationForm

EMAIL_REGEX = r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$"
ZIP_REGEX = r"^\d{5}(-\d{4})?$"
CARD_NUMBER_REGEX = r"^[0-9\s]+$"
EXPIRY_REGEX = r"^(0[1-9]|1[0-2])/\d{2}$"
DIGITS_REGEX = r"^\d+$"

SELECTION_PATH = "program.selected_programs"
SELECTION_MESSAGE = "Please select either membership only or at least one program"


@dataclass(frozen=True)
class FieldError:
    path: str
    message: str

    def to_dict(self) -> dict:
        return {"path": self.path, "message": self.message}


@dataclass
class ValidationResult:
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def by_path(self) -> Dict[str, str]:
        """First message per path, for templates."""
        out: Dict[str, str] = {}
        for err in self.errors:
            out.setdefault(err.path, err.message)
        return out

    def messages_for(self, path: str) -> List[str]:
        return [e.message for e in self.errors if e.path == path]

    def to_dict(self) -> dict:
        return {"valid": self.ok, "errors": [e.to_dict() for e in self.errors]}


# A check returns an error message or None.
Check = Callable[[str], Optional[str]]


def required(message: str) -> Check:
    return lambda v: None if len(v) >= 1 else message


def min_length(n: int, message: str) -> Check:
    return lambda v: None if len(v) >= n else message


def max_length(n: int, message: str) -> Check:
    return lambda v: None if len(v) <= n else message


def matches(pattern: str, message: str) -> Check:
    compiled = re.compile(pattern)
    return lambda v: None if compiled.match(v) else message


def one_of(choices: Sequence[str], message: str) -> Check:
    return lambda v: None if v in choices else message


FIELD_RULES: Dict[str, List[Check]] = {
    "parent.first_name": [required("First name is required")],
    "parent.last_name": [required("Last name is required")],
    "parent.email": [matches(EMAIL_REGEX, "Please enter a valid email address")],
    "payment.cardholder.first_name": [required("First name is required")],
    "payment.cardholder.last_name": [required("Last name is required")],
    "payment.billing.address": [required("Billing address is required")],
    "payment.billing.city": [required("City is required")],
    "payment.billing.state": [one_of(tuple(US_STATES), "Please select a state")],
    "payment.billing.zip_code": [
        min_length(5, "ZIP code must be at least 5 characters"),
        max_length(10, "ZIP code cannot exceed 10 characters"),
        matches(ZIP_REGEX, "Please enter a valid ZIP code"),
    ],
    "payment.card.type": [one_of(tuple(CARD_TYPES), "Please select a card type")],
    "payment.card.number": [
        min_length(13, "Card number is too short"),
        max_length(19, "Card number is too long"),
        matches(CARD_NUMBER_REGEX, "Please enter a valid card number"),
    ],
    "payment.card.expiry": [matches(EXPIRY_REGEX, "Please use MM/YY format")],
    "payment.card.cvv": [
        min_length(3, "CVV is too short"),
        max_length(4, "CVV is too long"),
        matches(DIGITS_REGEX, "CVV must contain only numbers"),
    ],
    "payment.amount": [required("Amount is required")],
}

CHILD_NAME_RULE: Check = required("Child's full name is required")


def _lookup(form: RegistrationForm, path: str) -> str:
    value = form
    for part in path.split("."):
        value = getattr(value, part)
    return value


def run_checks(value: str, checks: Sequence[Check]) -> Optional[str]:
    for check in checks:
        message = check(value)
        if message:
            return message
    return None


def validate_registration(form: RegistrationForm) -> ValidationResult:
    result = ValidationResult()

    def check(path: str, value: str, checks: Sequence[Check]) -> None:
        message = run_checks(value, checks)
        if message:
            result.errors.append(FieldError(path, message))

    for path in ("parent.first_name", "parent.last_name", "parent.email"):
        check(path, _lookup(form, path), FIELD_RULES[path])

    if not form.children:
        result.errors.append(FieldError("children", "At least one child is required"))
    for i, child in enumerate(form.children):
        check(f"children.{i}.full_name", child.full_name, [CHILD_NAME_RULE])

    selected = form.program.selected_programs
    unknown = [i for i, pid in enumerate(selected) if pid not in PROGRAM_IDS]
    for i in unknown:
        result.errors.append(FieldError(f"{SELECTION_PATH}.{i}", "Invalid program selection"))
    if not unknown and not (form.program.membership_only or selected):
        result.errors.append(FieldError(SELECTION_PATH, SELECTION_MESSAGE))

    for path, checks in FIELD_RULES.items():
        if path.startswith("payment."):
            check(path, _lookup(form, path), checks)

    return result


# Plain text fields per section of a raw registration dict.
_TEXT_FIELDS: Dict[str, Sequence[str]] = {
    "parent": ("first_name", "last_name", "email"),
    "payment": ("amount",),
    "payment.cardholder": ("first_name", "last_name"),
    "payment.billing": ("address", "city", "state", "zip_code"),
    "payment.card": ("type", "number", "expiry", "cvv"),
}


def _section(data: Dict[str, Any], path: str) -> Any:
    value: Any = data
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def check_shape(data: Dict[str, Any]) -> ValidationResult:
    """Type checks for a raw registration dict, before it becomes a form.

    Missing or null parts are fine (they fall back to blanks); parts of the
    wrong type are reported so nothing gets coerced into a different value.
    """
    result = ValidationResult()

    def bad(path: str, message: str) -> None:
        result.errors.append(FieldError(path, message))

    for path in ("parent", "program", "payment", "payment.cardholder", "payment.billing", "payment.card"):
        value = _section(data, path)
        if value is not None and not isinstance(value, dict):
            bad(path, "Must be an object")

    for path, names in _TEXT_FIELDS.items():
        section = _section(data, path)
        if not isinstance(section, dict):
            continue
        for name in names:
            value = section.get(name)
            if value is not None and not isinstance(value, str):
                bad(f"{path}.{name}", "Must be a string")

    children = data.get("children")
    if children is not None:
        if not isinstance(children, list):
            bad("children", "Must be a list")
        else:
            for i, child in enumerate(children):
                if not isinstance(child, dict) or not isinstance(child.get("full_name") or "", str):
                    bad(f"children.{i}", "Must be an object with a text full_name")

    program = _section(data, "program")
    if isinstance(program, dict):
        selected = program.get("selected_programs")
        if selected is not None and (
            not isinstance(selected, list) or not all(isinstance(p, str) for p in selected)
        ):
            bad(SELECTION_PATH, "Must be a list of program ids")
        if "membership_only" in program and not isinstance(program["membership_only"], bool):
            bad("program.membership_only", "Must be true or false")

    return result
