"""Total and itemized breakdown for a registration.

Pure functions over (selected program ids, membership-only flag, children).
Nothing in here raises for bad input: ids outside the catalog are skipped,
which callers prevent upstream anyway.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, List, Sequence

from fun4kidz.registration.catalog import (
    BASE_FEES_TOTAL,
    MEMBERSHIP_FEE,
    MEMBERSHIP_FEE_LABEL,
    REGISTRATION_FEE,
    REGISTRATION_FEE_LABEL,
    Program,
    get_program,
)

CENTS = Decimal("0.01")

KIND_BASE = "base"
KIND_PROGRAM = "program"


@dataclass(frozen=True)
class BreakdownLine:
    label: str
    amount: Decimal
    kind: str  # base | program

    def to_dict(self) -> dict:
        return {"item": self.label, "amount": f"{self.amount:.2f}", "type": self.kind}


@dataclass(frozen=True)
class Quote:
    total: str
    breakdown: List[BreakdownLine]
    children_count: int

    def subtotal(self, kind: str) -> Decimal:
        return subtotal(self.breakdown, kind)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "children_count": self.children_count,
            "breakdown": [line.to_dict() for line in self.breakdown],
            "subtotals": {
                KIND_BASE: f"{self.subtotal(KIND_BASE):.2f}",
                KIND_PROGRAM: f"{self.subtotal(KIND_PROGRAM):.2f}",
            },
        }


def money(value) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _child_name(child: Any) -> str:
    if isinstance(child, str):
        return child
    if isinstance(child, dict):
        return str(child.get("full_name") or child.get("fullName") or "")
    return str(getattr(child, "full_name", "") or "")


def effective_child_count(children: Iterable[Any] | None) -> int:
    """Children with a non-blank name; a registration always covers at least one."""
    named = [c for c in (children or []) if _child_name(c).strip()]
    return len(named) or 1


def _selected_programs(selected: Iterable[str]) -> List[Program]:
    programs: List[Program] = []
    seen = set()
    for pid in selected or []:
        program = get_program(pid)
        if program is None or program.id in seen:
            continue
        seen.add(program.id)
        programs.append(program)
    return programs


def _plural(count: int) -> str:
    return f"{count} child" if count == 1 else f"{count} children"


def calculate_total(
    selected_programs: Sequence[str],
    membership_only: bool,
    children: Iterable[Any] | None,
) -> str:
    if membership_only:
        return f"{money(BASE_FEES_TOTAL):.2f}"

    programs = _selected_programs(selected_programs)
    if not programs:
        return "0.00"

    count = effective_child_count(children)
    total = BASE_FEES_TOTAL
    for program in programs:
        total += program.rate * count
        if program.add_on_fee is not None:
            total += program.add_on_fee
    return f"{money(total):.2f}"


def calculation_breakdown(
    selected_programs: Sequence[str],
    membership_only: bool,
    children: Iterable[Any] | None,
) -> List[BreakdownLine]:
    base = [
        BreakdownLine(MEMBERSHIP_FEE_LABEL, money(MEMBERSHIP_FEE), KIND_BASE),
        BreakdownLine(REGISTRATION_FEE_LABEL, money(REGISTRATION_FEE), KIND_BASE),
    ]
    if membership_only:
        return base

    programs = _selected_programs(selected_programs)
    if not programs:
        return []

    count = effective_child_count(children)
    lines = list(base)
    for program in programs:
        lines.append(
            BreakdownLine(
                f"{program.breakdown_name} - {program.mode.rate_label} ({_plural(count)})",
                money(program.rate * count),
                KIND_PROGRAM,
            )
        )
        if program.add_on_fee is not None:
            lines.append(
                BreakdownLine(
                    f"{program.breakdown_name} - Registration Fee",
                    money(program.add_on_fee),
                    KIND_PROGRAM,
                )
            )
    return lines


def subtotal(lines: Iterable[BreakdownLine], kind: str) -> Decimal:
    return money(sum((line.amount for line in lines if line.kind == kind), Decimal("0")))


def quote(
    selected_programs: Sequence[str],
    membership_only: bool,
    children: Iterable[Any] | None,
) -> Quote:
    children = list(children or [])
    return Quote(
        total=calculate_total(selected_programs, membership_only, children),
        breakdown=calculation_breakdown(selected_programs, membership_only, children),
        children_count=effective_child_count(children),
    )
