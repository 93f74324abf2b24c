from flask import Blueprint, current_app, jsonify

from ..compare import calculate_power_level, compare_attributes, get_total_wins
from .params import MOCK_DATA_HEADER, error_response, require_arg

bp = Blueprint("comparison", __name__, url_prefix="/api")


@bp.get("/compare")
def compare():
    """Side-by-side comparison: GET /api/compare?char1=1&char2=2"""
    first_id = require_arg("char1", "Two character IDs are required (char1, char2)")
    second_id = require_arg("char2", "Two character IDs are required (char1, char2)")
    try:
        first = current_app.characters.get_character(first_id)
        second = current_app.characters.get_character(second_id)
    except Exception:
        current_app.logger.exception("/api/compare failed")
        return error_response("Failed to compare characters", 500)

    if first.data is None or second.data is None:
        missing = first_id if first.data is None else second_id
        return error_response(f"Character {missing} not found", 404)

    char1, char2 = first.data, second.data
    char1_wins, char2_wins, ties = get_total_wins(char1, char2)
    resp = jsonify({
        "char1": char1,
        "char2": char2,
        "attributes": compare_attributes(char1, char2),
        "totals": {"char1Wins": char1_wins, "char2Wins": char2_wins, "ties": ties},
        "powerLevel": {
            "char1": calculate_power_level(char1),
            "char2": calculate_power_level(char2),
        },
    })
    if first.from_fallback or second.from_fallback:
        resp.headers[MOCK_DATA_HEADER] = "true"
    return resp
