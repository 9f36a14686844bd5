"""As-you-type formatting for card inputs, plus money display."""

from __future__ import annotations

import re
from decimal import Decimal

_NON_DIGITS = re.compile(r"\D")
_CARD_RUN = re.compile(r"\d{4,16}")


def format_card_number(value: str) -> str:
    """Group card digits in fours: "4111111111111111" -> "4111 1111 1111 1111".

    Anything past sixteen digits is dropped. Inputs with fewer than four
    digits come back as the bare digits.
    """
    digits = _NON_DIGITS.sub("", value or "")
    match = _CARD_RUN.search(digits)
    run = match.group(0) if match else ""
    parts = [run[i:i + 4] for i in range(0, len(run), 4)]
    if parts:
        return " ".join(parts)
    return digits


def format_expiry(value: str) -> str:
    """"1225" -> "12/25". The year part may still be incomplete while typing."""
    digits = _NON_DIGITS.sub("", value or "")
    if len(digits) >= 2:
        return f"{digits[:2]}/{digits[2:4]}"
    return digits


def mask_card_number(value: str) -> str:
    digits = _NON_DIGITS.sub("", value or "")
    if len(digits) < 4:
        return "****"
    return f"**** {digits[-4:]}"


def format_money(amount) -> str:
    return f"{Decimal(amount):.2f}"
