"""
Vanquish catalog API: characters and comics from third-party providers,
with bundled sample data when those providers fail.
"""
from __future__ import annotations

from typing import Callable, Optional

from flask import Flask, jsonify

from .breaker import CircuitBreaker
from .character_service import CharacterService
from .comic_service import ComicService
from .comicvine import ComicVineClient
from .config import configure_logging, load_config, merge_config
from .getcomics import GetComicsClient
from .routes import BLUEPRINTS
from .routes.params import InvalidParameter


def create_app(
    config: Optional[dict] = None,
    comicvine=None,
    getcomics=None,
    clock: Optional[Callable[[], float]] = None,
) -> Flask:
    """Build the Flask app.

    ``config`` overrides the built-in defaults; without it the YAML file is
    loaded. Provider clients and the breaker clock can be injected.
    """
    settings = merge_config(config) if config is not None else load_config()
    logger = configure_logging(settings)

    providers = settings["providers"]
    cv = providers["comicvine"]
    gc = providers["getcomics"]
    breaker_config = settings["breaker"]

    if comicvine is None:
        comicvine = ComicVineClient(
            base_url=cv["base_url"],
            timeout=cv["timeout"],
            page_size=cv["page_size"],
        )
    if getcomics is None:
        getcomics = GetComicsClient(
            base_url=gc["base_url"],
            timeout=gc["timeout"],
            page_size=gc["page_size"],
            fetch_details=gc["fetch_details"],
        )

    breaker = CircuitBreaker(
        failure_threshold=breaker_config["failure_threshold"],
        reset_timeout=breaker_config["reset_timeout"],
        clock=clock,
        name="comics provider",
    )

    app = Flask(__name__)
    app.config["VANQUISH"] = settings
    app.characters = CharacterService(comicvine)
    app.comics = ComicService(getcomics, breaker, page_size=gc["page_size"])

    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)

    @app.errorhandler(InvalidParameter)
    def invalid_parameter(e):
        return jsonify({"error": str(e)}), 400

    logger.info("Catalog API initialized")
    return app
