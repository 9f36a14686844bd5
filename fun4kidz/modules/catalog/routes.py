from __future__ import annotations

from flask import Blueprint

from fun4kidz.app.common.errors import abort_json
from fun4kidz.registration.catalog import (
    BASE_FEES_TOTAL,
    CARD_TYPES,
    MEMBERSHIP_FEE,
    PROGRAMS,
    REGISTRATION_FEE,
    US_STATES,
    Program,
    get_program,
)

bp = Blueprint("catalog", __name__)


def program_to_dict(p: Program) -> dict:
    return {
        "id": p.id.value,
        "name": p.name,
        "pricing_mode": p.mode.value,
        "rate": f"{p.rate:.2f}",
        "add_on_fee": f"{p.add_on_fee:.2f}" if p.add_on_fee is not None else None,
        "description": p.description,
        "badges": [{"text": b.text, "tone": b.tone.value} for b in p.badges],
    }


@bp.get("/programs")
def list_programs():
    """GET /api/programs - the full catalog, in display order."""
    return {"items": [program_to_dict(p) for p in PROGRAMS.values()]}, 200


@bp.get("/programs/<program_id>")
def get_program_detail(program_id: str):
    p = get_program(program_id)
    if not p:
        abort_json(404, "not_found", "Program not found")
    return program_to_dict(p), 200


@bp.get("/fees")
def get_fees():
    return {
        "membership": f"{MEMBERSHIP_FEE:.2f}",
        "registration": f"{REGISTRATION_FEE:.2f}",
        "total": f"{BASE_FEES_TOTAL:.2f}",
    }, 200


@bp.get("/states")
def list_states():
    return {"items": [{"value": code, "label": name} for code, name in US_STATES.items()]}, 200


@bp.get("/card-types")
def list_card_types():
    return {"items": [{"value": code, "label": name} for code, name in CARD_TYPES.items()]}, 200
