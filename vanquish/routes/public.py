from flask import Blueprint, current_app, jsonify

bp = Blueprint("public", __name__, url_prefix="/api")


@bp.get("/health")
def health():
    # Minimal proof that the server is up, plus whether live comics calls are being skipped
    return jsonify({
        "status": "healthy",
        "comicsProvider": current_app.comics.breaker.state,
    })


@bp.get("/__routes")
def list_routes():
    """Debug helper: list all registered URL rules."""
    rules = [r.rule for r in current_app.url_map.iter_rules()]
    return jsonify(sorted(rules))
