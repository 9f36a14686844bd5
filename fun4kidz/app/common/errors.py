from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def error_payload(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request_id: str | None = None,
) -> Dict[str, Any]:
    """The one JSON error shape every /api failure uses."""
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "request_id": request_id,
        }
    }


@dataclass
class ApiError(Exception):
    """Raise from a route to answer with ``error_payload``."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        return error_payload(self.code, self.message, self.details, request_id)


def abort_json(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> None:
    raise ApiError(status_code=status_code, code=code, message=message, details=details)


def abort_validation(result) -> None:
    """400 with every field error attached, in the order they were found."""
    abort_json(
        400,
        "validation_error",
        "One or more fields are invalid",
        {"fields": [e.to_dict() for e in result.errors]},
    )
