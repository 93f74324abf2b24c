from flask import Blueprint, current_app, jsonify

from ..sorting import COMIC_SORT_FIELDS
from .params import (
    ERROR_HEADER,
    FALLBACK_HEADER,
    error_response,
    get_limit,
    get_offset,
    get_sort,
    no_limit,
    optional_arg,
    require_arg,
)

bp = Blueprint("comics", __name__, url_prefix="/api/comics")

DEFAULT_LIMIT = 12


def comics_response(result):
    resp = jsonify(result.data)
    if result.from_fallback:
        resp.headers[FALLBACK_HEADER] = "true"
        if result.error:
            # header values must stay on one line and encodable as latin-1
            reason = " ".join(str(result.error).split())
            resp.headers[ERROR_HEADER] = reason.encode("ascii", "backslashreplace").decode("ascii")[:200]
    return resp


@bp.get("")
def list_comics():
    """
    GET /api/comics?limit=12&offset=0
    GET /api/comics?noLimit=true to get the whole first provider page
    GET /api/comics?publisher=marvel for one publisher
    """
    limit = None if no_limit() else get_limit(DEFAULT_LIMIT)
    offset = get_offset()
    sort_by, direction = get_sort(COMIC_SORT_FIELDS, None)
    publisher = optional_arg("publisher")
    try:
        result = current_app.comics.list_comics(limit, offset, publisher, sort_by, direction)
        return comics_response(result)
    except Exception:
        current_app.logger.exception("/api/comics failed")
        return error_response("Failed to fetch comics. Please try again later.", 500)


@bp.get("/search")
def search_comics():
    """GET /api/comics/search?query=batman&limit=10 (or noLimit=true)"""
    query = require_arg("query", "Search query is required")
    limit = None if no_limit() else get_limit()
    offset = get_offset()
    try:
        result = current_app.comics.search_comics(query, limit, offset)
        return comics_response(result)
    except Exception:
        current_app.logger.exception("/api/comics/search failed")
        return error_response("Failed to search comics. Please try again later.", 500)


@bp.get("/<comic_id>")
def get_comic(comic_id: str):
    """Always answers 200 for a valid id; unknown comics come back as placeholders."""
    try:
        comic_id_value = int(comic_id)
    except ValueError:
        return error_response("Invalid comic ID", 400)
    try:
        result = current_app.comics.get_comic(comic_id_value)
        return comics_response(result)
    except Exception:
        current_app.logger.exception(f"/api/comics/{comic_id} failed")
        return error_response("Failed to fetch comic data", 500)
