"""Registration page state machine.

    EDITING --submit, valid--> SUBMITTING --collaborator--> SUCCESS --reset timer--> EDITING
    EDITING --submit, invalid--> EDITING (with errors)

Two one-shot deadlines are armed when a submission succeeds: ``reset_at``
returns the page to a fresh form, ``notice_hide_at`` hides the success
notice. They are independent of each other and there is no way to cancel
them; ``tick`` fires whichever are due.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from fun4kidz.registration.form import RegistrationForm, recompute_amount, reset
from fun4kidz.registration.pricing import Quote
from fun4kidz.registration.schema import FieldError, validate_registration
from fun4kidz.registration.submission import (
    GENERIC_FAILURE_MESSAGE,
    SubmissionError,
    SubmissionResult,
)


class Phase(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCESS = "success"


@dataclass(frozen=True)
class Timings:
    reset_seconds: float = 3.0
    notice_seconds: float = 5.0


@dataclass(frozen=True)
class ViewState:
    phase: Phase = Phase.EDITING
    form: RegistrationForm = field(default_factory=RegistrationForm)
    errors: Tuple[FieldError, ...] = ()
    submit_error: Optional[str] = None
    success_message: Optional[str] = None
    notice_visible: bool = False
    reset_at: Optional[float] = None
    notice_hide_at: Optional[float] = None

    @property
    def quote(self) -> Quote:
        return self.form.quote()

    def error_for(self, path: str) -> Optional[str]:
        for err in self.errors:
            if err.path == path:
                return err.message
        return None

    def next_deadline(self) -> Optional[float]:
        pending = [t for t in (self.reset_at, self.notice_hide_at) if t is not None]
        return min(pending) if pending else None

    def timers_to_dict(self) -> Dict[str, Any]:
        """Only what must survive a redirect; the form itself is never stored."""
        return {
            "phase": self.phase.value,
            "success_message": self.success_message,
            "notice_visible": self.notice_visible,
            "reset_at": self.reset_at,
            "notice_hide_at": self.notice_hide_at,
        }

    @classmethod
    def from_timers(cls, data: Optional[Dict[str, Any]]) -> "ViewState":
        if not data:
            return cls()
        try:
            phase = Phase(data.get("phase", Phase.EDITING.value))
        except ValueError:
            phase = Phase.EDITING
        return cls(
            phase=phase,
            success_message=data.get("success_message"),
            notice_visible=bool(data.get("notice_visible")),
            reset_at=data.get("reset_at"),
            notice_hide_at=data.get("notice_hide_at"),
        )


def apply(state: ViewState, transition: Callable[..., RegistrationForm], *args) -> ViewState:
    """Run a form transition. Allowed in any phase; pricing follows the form."""
    return replace(state, form=transition(state.form, *args))


def begin_submit(state: ViewState) -> ViewState:
    if state.phase is Phase.SUBMITTING:
        return state

    form = recompute_amount(state.form)
    result = validate_registration(form)
    if not result.ok:
        return replace(
            state,
            phase=Phase.EDITING,
            form=form,
            errors=tuple(result.errors),
            submit_error=None,
        )
    return replace(state, phase=Phase.SUBMITTING, form=form, errors=(), submit_error=None)


def complete_submit(state: ViewState, result: SubmissionResult, now: float, timings: Timings) -> ViewState:
    if state.phase is not Phase.SUBMITTING:
        return state
    if not result.ok:
        return replace(state, phase=Phase.EDITING, submit_error=result.message)
    return replace(
        state,
        phase=Phase.SUCCESS,
        success_message=result.message,
        notice_visible=True,
        reset_at=now + timings.reset_seconds,
        notice_hide_at=now + timings.notice_seconds,
    )


def submit(
    state: ViewState,
    submitter,
    timings: Timings,
    clock: Callable[[], float] = time.time,
) -> ViewState:
    """Validate, hand the form to ``submitter`` and arm the success timers."""
    if state.phase is Phase.SUBMITTING:
        return state

    started = begin_submit(state)
    if started.phase is not Phase.SUBMITTING:
        return started

    try:
        result = submitter.submit(started.form.to_dict())
    except SubmissionError as exc:
        result = SubmissionResult(ok=False, message=str(exc) or GENERIC_FAILURE_MESSAGE)
    return complete_submit(started, result, clock(), timings)


def tick(state: ViewState, now: float) -> ViewState:
    if state.notice_hide_at is not None and now >= state.notice_hide_at:
        state = replace(state, notice_visible=False, success_message=None, notice_hide_at=None)
    if state.reset_at is not None and now >= state.reset_at:
        state = replace(
            state,
            phase=Phase.EDITING,
            form=reset(),
            errors=(),
            submit_error=None,
            reset_at=None,
        )
    return state
