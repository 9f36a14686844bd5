from dataclasses import replace

from fun4kidz.registration.form import Child, RegistrationForm, recompute_amount
from fun4kidz.registration.schema import SELECTION_MESSAGE, SELECTION_PATH, check_shape, validate_registration


def priced(form):
    return recompute_amount(form)


# SCHEMA-001: a complete form passes
def test_valid_form(valid_form):
    result = validate_registration(priced(valid_form))
    assert result.ok
    assert result.to_dict() == {"valid": True, "errors": []}


# SCHEMA-002: a bad email gives exactly one message on the email path
def test_bad_email(valid_form):
    form = priced(replace(valid_form, parent=replace(valid_form.parent, email="not-an-email")))
    result = validate_registration(form)
    assert not result.ok
    assert result.messages_for("parent.email") == ["Please enter a valid email address"]
    assert [e.path for e in result.errors] == ["parent.email"]

    fixed = replace(form, parent=replace(form.parent, email="parent@example.com"))
    assert validate_registration(fixed).ok


# SCHEMA-003: neither membership nor a program is selected
def test_selection_required(valid_form):
    form = priced(replace(valid_form, program=replace(valid_form.program, selected_programs=())))
    result = validate_registration(form)
    assert result.by_path()[SELECTION_PATH] == SELECTION_MESSAGE

    with_membership = priced(replace(form, program=replace(form.program, membership_only=True)))
    assert validate_registration(with_membership).ok

    with_program = priced(replace(form, program=replace(form.program, selected_programs=("homeschooling",))))
    assert validate_registration(with_program).ok


# SCHEMA-004: every empty field is reported at once
def test_empty_form_reports_everything():
    result = validate_registration(priced(RegistrationForm()))
    paths = [e.path for e in result.errors]
    assert paths == [
        "parent.first_name",
        "parent.last_name",
        "parent.email",
        "children.0.full_name",
        SELECTION_PATH,
        "payment.cardholder.first_name",
        "payment.cardholder.last_name",
        "payment.billing.address",
        "payment.billing.city",
        "payment.billing.state",
        "payment.billing.zip_code",
        "payment.card.type",
        "payment.card.number",
        "payment.card.expiry",
        "payment.card.cvv",
    ]
    by_path = result.by_path()
    assert by_path["children.0.full_name"] == "Child's full name is required"
    assert by_path["payment.billing.zip_code"] == "ZIP code must be at least 5 characters"
    assert by_path["payment.card.number"] == "Card number is too short"
    assert by_path["payment.card.cvv"] == "CVV is too short"


# SCHEMA-005: each blank child row is reported by index
def test_blank_child_rows(valid_form):
    form = priced(replace(valid_form, children=(Child("Ana"), Child("  "), Child(""))))
    result = validate_registration(form)
    # whitespace-only names still pass the length check
    assert [e.path for e in result.errors] == ["children.2.full_name"]


# SCHEMA-006: no children at all
def test_no_children(valid_form):
    result = validate_registration(priced(replace(valid_form, children=())))
    assert result.messages_for("children") == ["At least one child is required"]


# SCHEMA-007: unknown program ids are reported by position
def test_unknown_program(valid_form):
    form = priced(replace(valid_form, program=replace(valid_form.program, selected_programs=("learn-play", "pottery"))))
    result = validate_registration(form)
    assert result.by_path() == {f"{SELECTION_PATH}.1": "Invalid program selection"}


# SCHEMA-008: payment field rules
def test_payment_rules(valid_form):
    card = replace(valid_form.payment.card, number="4111-1111-1111-1111", expiry="13/25", cvv="12a")
    billing = replace(valid_form.payment.billing, state="ZZ", zip_code="1234")
    form = priced(replace(valid_form, payment=replace(valid_form.payment, card=card, billing=billing)))
    by_path = validate_registration(form).by_path()
    assert by_path == {
        "payment.billing.state": "Please select a state",
        "payment.billing.zip_code": "ZIP code must be at least 5 characters",
        "payment.card.number": "Please enter a valid card number",
        "payment.card.expiry": "Please use MM/YY format",
        "payment.card.cvv": "CVV must contain only numbers",
    }


# SCHEMA-009: zip+4 and amex-length numbers are fine
def test_payment_rules_accept(valid_form):
    card = replace(valid_form.payment.card, type="amex", number="3782 822463 10005", cvv="1234")
    billing = replace(valid_form.payment.billing, zip_code="62701-1234")
    form = priced(replace(valid_form, payment=replace(valid_form.payment, card=card, billing=billing)))
    assert validate_registration(form).ok


# SCHEMA-010: an unpriced form is missing its amount
def test_amount_required(valid_form):
    result = validate_registration(valid_form)
    assert result.messages_for("payment.amount") == ["Amount is required"]


# SCHEMA-011: shape check accepts a well-typed body and missing parts
def test_check_shape_ok(valid_payload):
    assert check_shape(valid_payload).ok
    assert check_shape({}).ok
    assert check_shape({"children": None, "payment": {"card": None}}).ok


# SCHEMA-012: shape check reports each wrongly typed part by path
def test_check_shape_errors(valid_payload):
    valid_payload["parent"]["email"] = 42
    valid_payload["children"] = [{"full_name": "Ana"}, "Ben", {"full_name": 3}]
    valid_payload["program"] = {"selected_programs": ["learn-play", 1], "membership_only": "false"}
    valid_payload["payment"]["billing"] = ["1 Main St"]
    result = check_shape(valid_payload)
    assert [e.path for e in result.errors] == [
        "payment.billing",
        "parent.email",
        "children.1",
        "children.2",
        SELECTION_PATH,
        "program.membership_only",
    ]
