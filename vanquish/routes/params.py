from __future__ import annotations

from typing import Dict, Optional

from flask import jsonify, request

from ..sorting import ASC, SORT_DIRECTIONS, SortField

MOCK_DATA_HEADER = "X-Using-Mock-Data"
FALLBACK_HEADER = "X-Fallback"
ERROR_HEADER = "X-Error"


class InvalidParameter(ValueError):
    """A query or path parameter is missing or malformed (HTTP 400)."""


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def _get_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidParameter(f"Invalid {name}: must be an integer")
    if value < 0:
        raise InvalidParameter(f"Invalid {name}: must not be negative")
    return value


def get_limit(default: Optional[int] = None) -> Optional[int]:
    return _get_int("limit", default)


def get_offset() -> int:
    return _get_int("offset", 0)


def get_sort(fields: Dict[str, SortField], default: Optional[str]) -> tuple[Optional[str], str]:
    sort_by = request.args.get("sortBy") or default
    if sort_by is not None and sort_by not in fields:
        raise InvalidParameter(f"Invalid sortBy: expected one of {', '.join(fields)}")
    direction = (request.args.get("sortDirection") or ASC).lower()
    if direction not in SORT_DIRECTIONS:
        raise InvalidParameter("Invalid sortDirection: expected asc or desc")
    return sort_by, direction


def require_arg(name: str, message: str) -> str:
    value = (request.args.get(name) or "").strip()
    if not value:
        raise InvalidParameter(message)
    return value


def no_limit() -> bool:
    return request.args.get("noLimit") == "true"


def optional_arg(name: str) -> Optional[str]:
    value = (request.args.get(name) or "").strip()
    return value or None
