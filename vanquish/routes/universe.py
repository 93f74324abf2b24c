from flask import Blueprint, current_app

from ..character_service import DEFAULT_SORT, PUBLISHERS
from ..sorting import CHARACTER_SORT_FIELDS
from .characters import characters_response
from .params import error_response, get_limit, get_offset, get_sort

bp = Blueprint("universe", __name__, url_prefix="/api/universe")


@bp.get("/<publisher>")
def publisher_characters(publisher: str):
    """Characters of one universe: GET /api/universe/marvel or /api/universe/dc"""
    publisher = publisher.strip().lower()
    if publisher not in PUBLISHERS:
        return error_response("Invalid publisher", 400)
    limit = get_limit()
    offset = get_offset()
    sort_by, direction = get_sort(CHARACTER_SORT_FIELDS, DEFAULT_SORT)
    try:
        result = current_app.characters.list_characters_by_publisher(
            publisher, limit, offset, sort_by, direction
        )
        return characters_response(result)
    except Exception:
        current_app.logger.exception(f"/api/universe/{publisher} failed")
        return error_response("Failed to fetch publisher characters", 500)
