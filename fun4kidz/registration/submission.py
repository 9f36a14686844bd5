"""Submission collaborators.

Nothing is persisted and no payment gateway is called. The simulated
submitter logs the registration and waits a fixed delay before reporting
success; the interest collaborator logs the request.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict

from fun4kidz.registration.formatting import mask_card_number

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration submitted successfully! You will receive a confirmation email shortly."
INTEREST_SUCCESS_MESSAGE = "Thanks! We'll be in touch with more information soon."
GENERIC_FAILURE_MESSAGE = "Something went wrong. Please try again."


class SubmissionError(Exception):
    """Raised by a collaborator that could not accept a submission."""


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    message: str


def redact(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a registration dict that is safe to log."""
    payment = dict(payload.get("payment") or {})
    card = dict(payment.get("card") or {})
    if card:
        card["number"] = mask_card_number(card.get("number", ""))
        card.pop("cvv", None)
        payment["card"] = card
    return {**payload, "payment": payment}


class SimulatedSubmitter:
    """Always succeeds after ``delay_seconds``."""

    def __init__(self, delay_seconds: float = 2.0, sleep: Callable[[float], None] = time.sleep):
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def submit(self, payload: Dict[str, Any]) -> SubmissionResult:
        logger.info("Registration submitted: %s", redact(payload))
        if self.delay_seconds > 0:
            self._sleep(self.delay_seconds)
        return SubmissionResult(ok=True, message=SUCCESS_MESSAGE)


class LoggingInterestSubmitter:
    """Receives quick "tell me more" requests from the home page."""

    def submit(self, payload: Dict[str, Any]) -> SubmissionResult:
        logger.info("Program interest received: %s", payload)
        return SubmissionResult(ok=True, message=INTEREST_SUCCESS_MESSAGE)
