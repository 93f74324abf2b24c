from flask import Blueprint, current_app, jsonify

from ..character_service import DEFAULT_SORT
from ..sorting import CHARACTER_SORT_FIELDS
from .params import (
    MOCK_DATA_HEADER,
    error_response,
    get_limit,
    get_offset,
    get_sort,
    optional_arg,
    require_arg,
)

bp = Blueprint("characters", __name__, url_prefix="/api/characters")


def characters_response(result):
    resp = jsonify(result.data)
    if result.from_fallback:
        resp.headers[MOCK_DATA_HEADER] = "true"
    return resp


@bp.get("")
def list_characters():
    """All characters, paginated and sorted.

    GET /api/characters?limit=12&offset=0&sortBy=name&sortDirection=asc
    """
    limit = get_limit()
    offset = get_offset()
    sort_by, direction = get_sort(CHARACTER_SORT_FIELDS, DEFAULT_SORT)
    try:
        result = current_app.characters.list_characters(limit, offset, sort_by, direction)
        return characters_response(result)
    except Exception:
        current_app.logger.exception("/api/characters failed")
        return error_response("Failed to fetch character list. Please try again later.", 500)


@bp.get("/count")
def count_characters():
    query = optional_arg("query")
    try:
        result = current_app.characters.count_characters(query)
        resp = jsonify({"count": result.data})
        if result.from_fallback:
            resp.headers[MOCK_DATA_HEADER] = "true"
        return resp
    except Exception:
        current_app.logger.exception("/api/characters/count failed")
        return error_response("Failed to count characters", 500)


@bp.get("/search")
def search_characters():
    """GET /api/characters/search?query=batman&limit=10&offset=0"""
    query = require_arg("query", "Search query is required")
    limit = get_limit()
    offset = get_offset()
    sort_by, direction = get_sort(CHARACTER_SORT_FIELDS, DEFAULT_SORT)
    try:
        result = current_app.characters.search_characters(query, limit, offset, sort_by, direction)
        return characters_response(result)
    except Exception:
        current_app.logger.exception("/api/characters/search failed")
        return error_response("Failed to perform character search. Please try again later.", 500)


@bp.get("/search/<path:query>")
def search_characters_by_path(query: str):
    """Path-style search without pagination: GET /api/characters/search/batman"""
    query = query.strip()
    if not query:
        return error_response("Search query is required", 400)
    try:
        result = current_app.characters.search_characters(query)
        return characters_response(result)
    except Exception:
        current_app.logger.exception("/api/characters/search/<query> failed")
        return error_response("Failed to perform character search", 500)


@bp.get("/<character_id>")
def get_character(character_id: str):
    character_id = character_id.strip()
    if not character_id:
        return error_response("Character ID is required", 400)
    try:
        result = current_app.characters.get_character(character_id)
    except Exception:
        current_app.logger.exception(f"/api/characters/{character_id} failed")
        # Don't expose detailed error messages to the client
        return error_response("Failed to fetch character data", 500)
    if result.data is None:
        return error_response("Character not found", 404)
    return characters_response(result)
