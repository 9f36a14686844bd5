from fun4kidz.registration.form import (
    Child,
    RegistrationForm,
    add_child,
    recompute_amount,
    remove_child,
    rename_child,
    reset,
    select_programs,
    set_membership_only,
    toggle_program,
    update_field,
)


# FORM-001: a fresh form has one blank child and nothing selected
def test_reset():
    form = reset()
    assert form.children == (Child(),)
    assert form.program.selected_programs == ()
    assert form.program.membership_only is False
    assert form.payment.amount == ""


# FORM-002: checking a program clears membership only
def test_toggle_program_clears_membership():
    form = set_membership_only(reset(), True)
    assert form.payment.amount == "25.00"

    form = toggle_program(form, "homeschooling", True)
    assert form.program.membership_only is False
    assert form.program.selected_programs == ("homeschooling",)
    assert form.payment.amount == "225.00"


# FORM-003: membership only clears the program selection
def test_membership_clears_programs():
    form = toggle_program(reset(), "learn-play", True)
    form = toggle_program(form, "after-school", True)
    form = set_membership_only(form, True)
    assert form.program.selected_programs == ()
    assert form.program.membership_only is True
    assert form.payment.amount == "25.00"


# FORM-004: the two choices are never both on, whatever the order
def test_exclusivity_after_each_step():
    steps = [
        (set_membership_only, (True,)),
        (toggle_program, ("after-school", True)),
        (set_membership_only, (True,)),
        (toggle_program, ("lego-robotics", True)),
        (toggle_program, ("lego-robotics", False)),
        (set_membership_only, (False,)),
    ]
    form = reset()
    for fn, args in steps:
        form = fn(form, *args)
        assert not (form.program.membership_only and form.program.selected_programs)


# FORM-005: selection keeps catalog order and ignores unknown ids
def test_toggle_order_and_unknown():
    form = toggle_program(reset(), "learn-play", True)
    form = toggle_program(form, "after-school", True)
    assert form.program.selected_programs == ("after-school", "learn-play")

    same = toggle_program(form, "pottery", True)
    assert same is form


# FORM-006: unchecking keeps membership as it was
def test_uncheck_program():
    form = toggle_program(reset(), "learn-play", True)
    form = toggle_program(form, "learn-play", False)
    assert form.program.selected_programs == ()
    assert form.payment.amount == "0.00"


# FORM-007: select_programs lets membership win
def test_select_programs():
    form = select_programs(reset(), ["learn-play", "after-school"])
    assert form.program.selected_programs == ("after-school", "learn-play")

    form = select_programs(form, ["learn-play"], membership_only=True)
    assert form.program.selected_programs == ()
    assert form.program.membership_only is True


# FORM-008: adding and renaming children reprices the form
def test_children_reprice():
    form = toggle_program(reset(), "learn-play", True)
    assert form.payment.amount == "145.00"

    form = rename_child(form, 0, "Ana")
    form = add_child(form)
    assert len(form.children) == 2
    # blank second row does not count yet
    assert form.payment.amount == "145.00"

    form = rename_child(form, 1, "Ben")
    assert form.payment.amount == "265.00"

    form = remove_child(form, 0)
    assert [c.full_name for c in form.children] == ["Ben"]
    assert form.payment.amount == "145.00"


# FORM-009: the last child row cannot be removed; bad indexes are ignored
def test_remove_child_guards():
    form = reset()
    assert remove_child(form, 0) is form

    form = add_child(form)
    assert remove_child(form, 5) is form
    assert remove_child(form, -1) is form
    assert rename_child(form, 9, "X") is form


# FORM-010: update_field sets plain text fields by path
def test_update_field():
    form = update_field(reset(), "parent.email", "dana@example.com")
    form = update_field(form, "payment.billing.city", "Springfield")
    form = update_field(form, "payment.card.cvv", "123")
    assert form.parent.email == "dana@example.com"
    assert form.payment.billing.city == "Springfield"
    assert form.payment.card.cvv == "123"


# FORM-011: update_field ignores paths it does not own
def test_update_field_unknown_paths():
    form = reset()
    assert update_field(form, "payment.amount", "999.00") is form
    assert update_field(form, "parent.nickname", "x") is form
    assert update_field(form, "program.membership_only", "1") is form


# FORM-012: transitions never mutate the input
def test_transitions_are_pure():
    form = reset()
    toggle_program(form, "learn-play", True)
    add_child(form)
    update_field(form, "parent.first_name", "Dana")
    assert form == reset()


# FORM-013: recompute_amount follows the pricing engine
def test_recompute_amount():
    form = RegistrationForm.from_dict(
        {
            "children": [{"full_name": "A"}, {"full_name": "B"}, {"full_name": "C"}],
            "program": {"selected_programs": ["after-school"]},
            "payment": {"amount": "1.00"},
        }
    )
    assert recompute_amount(form).payment.amount == "505.00"


# FORM-014: dict round trip keeps unknown ids for the validator
def test_from_dict_and_to_dict(valid_payload):
    valid_payload["program"]["selected_programs"] = ["learn-play", "bogus", "learn-play"]
    form = RegistrationForm.from_dict(valid_payload)
    assert form.program.selected_programs == ("learn-play", "bogus")

    data = form.to_dict()
    assert data["parent"]["email"] == "dana@example.com"
    assert data["children"] == [{"full_name": "Sam Lee"}]
    assert data["payment"]["billing"]["zip_code"] == "62701"


# FORM-015: missing children default to one blank row
def test_from_dict_defaults():
    form = RegistrationForm.from_dict({})
    assert form.children == (Child(),)
    assert RegistrationForm.from_dict({"children": []}).children == ()
