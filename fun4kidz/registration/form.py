"""Registration form value and the transitions applied to it.

Every transition returns a new ``RegistrationForm``; nothing is mutated in
place. Transitions that touch the program selection or the children list
also recompute ``payment.amount`` so the amount always matches the pricing
engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from fun4kidz.registration.catalog import catalog_order, get_program
from fun4kidz.registration.pricing import calculate_total, quote, Quote


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Parent:
    first_name: str = ""
    last_name: str = ""
    email: str = ""


@dataclass(frozen=True)
class Child:
    full_name: str = ""


@dataclass(frozen=True)
class ProgramSelection:
    selected_programs: Tuple[str, ...] = ()
    membership_only: bool = False


@dataclass(frozen=True)
class Cardholder:
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True)
class Billing:
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


@dataclass(frozen=True)
class Card:
    type: str = ""
    number: str = ""
    expiry: str = ""
    cvv: str = ""


@dataclass(frozen=True)
class Payment:
    cardholder: Cardholder = field(default_factory=Cardholder)
    billing: Billing = field(default_factory=Billing)
    card: Card = field(default_factory=Card)
    amount: str = ""


@dataclass(frozen=True)
class RegistrationForm:
    parent: Parent = field(default_factory=Parent)
    children: Tuple[Child, ...] = (Child(),)
    program: ProgramSelection = field(default_factory=ProgramSelection)
    payment: Payment = field(default_factory=Payment)

    def quote(self) -> Quote:
        return quote(self.program.selected_programs, self.program.membership_only, self.children)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parent": {
                "first_name": self.parent.first_name,
                "last_name": self.parent.last_name,
                "email": self.parent.email,
            },
            "children": [{"full_name": c.full_name} for c in self.children],
            "program": {
                "selected_programs": list(self.program.selected_programs),
                "membership_only": self.program.membership_only,
            },
            "payment": {
                "cardholder": {
                    "first_name": self.payment.cardholder.first_name,
                    "last_name": self.payment.cardholder.last_name,
                },
                "billing": {
                    "address": self.payment.billing.address,
                    "city": self.payment.billing.city,
                    "state": self.payment.billing.state,
                    "zip_code": self.payment.billing.zip_code,
                },
                "card": {
                    "type": self.payment.card.type,
                    "number": self.payment.card.number,
                    "expiry": self.payment.card.expiry,
                    "cvv": self.payment.card.cvv,
                },
                "amount": self.payment.amount,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegistrationForm":
        """Build a form from a JSON-ish dict. Missing parts fall back to defaults.

        The program selection is kept as given (ids are not filtered) so the
        validator can report unknown ids. Types are not checked here; JSON
        bodies go through ``schema.check_shape`` first.
        """
        data = data or {}
        parent = data.get("parent") or {}
        program = data.get("program") or {}
        payment = data.get("payment") or {}
        cardholder = payment.get("cardholder") or {}
        billing = payment.get("billing") or {}
        card = payment.get("card") or {}

        raw_children = data.get("children")
        if raw_children is None:
            children: Tuple[Child, ...] = (Child(),)
        else:
            children = tuple(
                Child(full_name=_text(c.get("full_name") if isinstance(c, dict) else c))
                for c in raw_children
            )

        selected = program.get("selected_programs") or []
        if isinstance(selected, str):
            selected = [selected]

        return cls(
            parent=Parent(
                first_name=_text(parent.get("first_name")),
                last_name=_text(parent.get("last_name")),
                email=_text(parent.get("email")),
            ),
            children=children,
            program=ProgramSelection(
                selected_programs=tuple(dict.fromkeys(_text(p) for p in selected)),
                membership_only=program.get("membership_only") is True,
            ),
            payment=Payment(
                cardholder=Cardholder(
                    first_name=_text(cardholder.get("first_name")),
                    last_name=_text(cardholder.get("last_name")),
                ),
                billing=Billing(
                    address=_text(billing.get("address")),
                    city=_text(billing.get("city")),
                    state=_text(billing.get("state")),
                    zip_code=_text(billing.get("zip_code")),
                ),
                card=Card(
                    type=_text(card.get("type")),
                    number=_text(card.get("number")),
                    expiry=_text(card.get("expiry")),
                    cvv=_text(card.get("cvv")),
                ),
                amount=_text(payment.get("amount")),
            ),
        )


# --- transitions ---


def reset() -> RegistrationForm:
    return RegistrationForm()


def recompute_amount(form: RegistrationForm) -> RegistrationForm:
    amount = calculate_total(form.program.selected_programs, form.program.membership_only, form.children)
    if amount == form.payment.amount:
        return form
    return replace(form, payment=replace(form.payment, amount=amount))


def toggle_program(form: RegistrationForm, program_id: str, checked: bool) -> RegistrationForm:
    """Check or uncheck a program. Checking one clears membership-only."""
    if get_program(program_id) is None:
        return form
    current = set(form.program.selected_programs)
    if checked:
        current.add(program_id)
    else:
        current.discard(program_id)
    selection = ProgramSelection(
        selected_programs=tuple(catalog_order(current)),
        membership_only=False if checked else form.program.membership_only,
    )
    return recompute_amount(replace(form, program=selection))


def set_membership_only(form: RegistrationForm, membership_only: bool) -> RegistrationForm:
    """Membership-only and a program selection are mutually exclusive."""
    if membership_only:
        selection = ProgramSelection(selected_programs=(), membership_only=True)
    else:
        selection = replace(form.program, membership_only=False)
    return recompute_amount(replace(form, program=selection))


def select_programs(form: RegistrationForm, program_ids, membership_only: bool = False) -> RegistrationForm:
    """Replace the whole selection at once (used for full form posts).

    Membership-only wins when both are submitted together, mirroring a user
    ticking it last.
    """
    if membership_only:
        return set_membership_only(form, True)
    selection = ProgramSelection(selected_programs=tuple(catalog_order(program_ids)), membership_only=False)
    return recompute_amount(replace(form, program=selection))


def add_child(form: RegistrationForm) -> RegistrationForm:
    return recompute_amount(replace(form, children=form.children + (Child(),)))


def remove_child(form: RegistrationForm, index: int) -> RegistrationForm:
    """Drop a child row; the last remaining row is never removed."""
    if len(form.children) <= 1 or not 0 <= index < len(form.children):
        return form
    children = form.children[:index] + form.children[index + 1:]
    return recompute_amount(replace(form, children=children))


def rename_child(form: RegistrationForm, index: int, full_name: str) -> RegistrationForm:
    if not 0 <= index < len(form.children):
        return form
    children = list(form.children)
    children[index] = Child(full_name=full_name)
    return recompute_amount(replace(form, children=tuple(children)))


_SECTIONS = {
    "parent": ("parent",),
    "payment.cardholder": ("payment", "cardholder"),
    "payment.billing": ("payment", "billing"),
    "payment.card": ("payment", "card"),
}


def update_field(form: RegistrationForm, path: str, value: str) -> RegistrationForm:
    """Set a plain text field by dotted path, e.g. ``payment.billing.city``.

    Selection, children and amount have their own transitions; paths that
    point at them (or at nothing) leave the form unchanged.
    """
    section_path, _, name = path.rpartition(".")
    keys = _SECTIONS.get(section_path)
    if keys is None:
        return form

    if keys == ("parent",):
        if not hasattr(form.parent, name):
            return form
        return replace(form, parent=replace(form.parent, **{name: value}))

    section = getattr(form.payment, keys[1])
    if not hasattr(section, name):
        return form
    return replace(form, payment=replace(form.payment, **{keys[1]: replace(section, **{name: value})}))
