"""Server-rendered pages: home, programs, registration."""

from __future__ import annotations

import math
import time

from flask import Blueprint, current_app, flash, redirect, render_template, request, session, url_for

from fun4kidz.app import content
from fun4kidz.app.extensions import interest_submitter, registration_submitter
from fun4kidz.registration import view
from fun4kidz.registration.catalog import CARD_TYPES, MEMBERSHIP_TONE, PROGRAMS, TONE_STYLES, US_STATES
from fun4kidz.registration.form import (
    RegistrationForm,
    add_child,
    recompute_amount,
    remove_child,
    select_programs,
    update_field,
)
from fun4kidz.registration.formatting import format_card_number, format_expiry
from fun4kidz.registration.interest import clean_interest, submit_interest, validate_interest

ui_bp = Blueprint("ui", __name__)

VIEW_SESSION_KEY = "registration_view"

TEXT_FIELDS = (
    "parent.first_name",
    "parent.last_name",
    "parent.email",
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
)


@ui_bp.get("/")
def home():
    return render_template(
        "pages/home.html",
        programs=content.HOME_PROGRAMS,
        features=content.FEATURES,
        stats=content.STATS,
        testimonials=content.TESTIMONIALS,
        interest_options=list(PROGRAMS.values()),
    )


@ui_bp.post("/interest")
def interest_post():
    cleaned = clean_interest(request.form.to_dict())
    result = validate_interest(cleaned)
    if not result.ok:
        for err in result.errors:
            flash(err.message, "error")
        return redirect(url_for("ui.home", _anchor="contact"))

    outcome = submit_interest(cleaned, interest_submitter())
    flash(outcome.message, "success" if outcome.ok else "error")
    return redirect(url_for("ui.home", _anchor="contact"))


@ui_bp.get("/programs")
def programs_page():
    return render_template("pages/programs.html", pages=content.PROGRAM_PAGES)


def _selection_from_post(post) -> tuple[list[str], bool]:
    """Resolve the checkboxes into one selection.

    Without scripting the browser posts both the membership box and any
    program boxes. Whichever one the user just turned on wins, which keeps
    the two mutually exclusive.
    """
    programs = post.getlist("program.selected_programs")
    membership = "program.membership_only" in post
    if membership and programs:
        was_membership = post.get("prev_membership_only") == "1"
        membership = not was_membership
    return programs, membership


def form_from_post(post) -> RegistrationForm:
    form = RegistrationForm.from_dict(
        {"children": [{"full_name": name} for name in post.getlist("children.full_name")] or None}
    )
    for path in TEXT_FIELDS:
        value = post.get(path, "")
        if path == "payment.card.number":
            value = format_card_number(value)
        elif path == "payment.card.expiry":
            value = format_expiry(value)
        form = update_field(form, path, value)

    programs, membership = _selection_from_post(post)
    return select_programs(form, programs, membership)


def _timings() -> view.Timings:
    return view.Timings(
        reset_seconds=current_app.config["SUCCESS_RESET_SECONDS"],
        notice_seconds=current_app.config["SUCCESS_NOTICE_SECONDS"],
    )


def _render_register(state: view.ViewState, now: float, status: int = 200):
    deadline = state.next_deadline()
    refresh_in = max(1, math.ceil(deadline - now)) if deadline is not None else None
    return (
        render_template(
            "pages/register.html",
            state=state,
            form=state.form,
            quote=state.quote,
            programs=list(PROGRAMS.values()),
            states=US_STATES,
            card_types=CARD_TYPES,
            membership_style=TONE_STYLES[MEMBERSHIP_TONE],
            refresh_in=refresh_in,
        ),
        status,
    )


@ui_bp.get("/register")
def register_page():
    now = time.time()
    state = view.tick(view.ViewState.from_timers(session.get(VIEW_SESSION_KEY)), now)
    if state.next_deadline() is None:
        session.pop(VIEW_SESSION_KEY, None)
    else:
        session[VIEW_SESSION_KEY] = state.timers_to_dict()
    return _render_register(state, now)


@ui_bp.post("/register")
def register_post():
    now = time.time()
    state = view.ViewState(form=form_from_post(request.form))
    action = request.form.get("action", "update")

    if action == "add_child":
        state = view.apply(state, add_child)
    elif action.startswith("remove_child:"):
        try:
            index = int(action.split(":", 1)[1])
        except ValueError:
            index = -1
        state = view.apply(state, remove_child, index)
    elif action == "submit":
        state = view.submit(state, registration_submitter(), _timings())
        if state.phase is view.Phase.SUCCESS:
            session[VIEW_SESSION_KEY] = state.timers_to_dict()
            return redirect(url_for("ui.register_page"))
        return _render_register(state, now, status=400 if state.errors else 200)
    else:
        state = view.apply(state, recompute_amount)

    return _render_register(state, now)
