"""
HTTP adapter for the KBBI engine.
Exposes:
- create_app
- health_bp
- kamus_bp
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from kamus import EngineHolder

from .config import DEFAULTS, from_env, log_level
from .health import health_bp
from .kamus import kamus_bp

__all__ = ["create_app", "health_bp", "kamus_bp"]


def create_app(config=None):
    """
    Build the Flask app. Settings come from kamus_api.config.DEFAULTS,
    then environment variables, then `config`.
    """
    app = Flask(__name__)
    settings, warnings = from_env()
    app.config.update(settings)
    if config:
        app.config.update(config)

    level = log_level("KAMUS_LOG_LEVEL", app.config["KAMUS_LOG_LEVEL"], DEFAULTS["KAMUS_LOG_LEVEL"], warnings)
    app.config["KAMUS_LOG_LEVEL"] = level
    app.logger.setLevel(level)
    logging.getLogger("kamus").setLevel(level)
    for w in warnings:
        app.logger.warning("config: %s", w)

    CORS(app, resources={r"/api/*": {"origins": "*"}}, send_wildcard=True)

    app.register_blueprint(health_bp)
    app.register_blueprint(kamus_bp)

    @app.errorhandler(404)
    def _not_found(_err):
        return jsonify({"error": "Not Found"}), 404

    holder = EngineHolder(app.config["KAMUS_DATA_DIR"])
    app.extensions["kamus"] = holder
    if app.config["KAMUS_PRELOAD"]:
        engine = holder.get()
        if engine.is_empty:
            app.logger.warning("KBBI word index is empty; search and suggestions will return 500")

    return app
