from __future__ import annotations

import logging
import uuid

from flask import g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"


def init_request_id() -> str:
    """Use the caller's X-Request-ID when given, else mint one."""
    rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    g.request_id = rid
    return rid


def current_request_id() -> str | None:
    if not has_request_context():
        return None
    return getattr(g, "request_id", None)


class RequestIdFilter(logging.Filter):
    """Stamp log records with the current request id ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id() or "-"
        return True
