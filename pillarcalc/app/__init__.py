"""Application factory and app-wide configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from pillarcalc.app.api.routes import api_bp
from pillarcalc.config import DefaultConfig


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(DefaultConfig)
    app.config.from_prefixed_env("PILLARCALC")
    if test_config:
        app.config.update(test_config)

    # a non-numeric env override should stop the app here, not fail every request
    for key in ("PILLAR_FINAL_TAX_RATE", "BROKERAGE_FINAL_TAX_RATE"):
        app.config[key] = float(app.config[key])

    app.logger.setLevel(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
