from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from flask import Flask

from css_unity.config import CSSUnityConfig


def create_app(
    stylesheets: Sequence[str | Path] | str | None = None,
    config: CSSUnityConfig | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app serving inlined stylesheets."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    config = config or CSSUnityConfig()
    if config.mhtml_uri is None and app.config.get("CSS_UNITY_MHTML_URI"):
        config = replace(config, mhtml_uri=app.config["CSS_UNITY_MHTML_URI"])

    # Pipelines hold per-request buffers, so only the inputs are shared.
    app.extensions["css_unity_stylesheets"] = stylesheets
    app.extensions["css_unity_config"] = config

    from css_unity.web.routes.stylesheets import stylesheets_bp

    app.register_blueprint(stylesheets_bp)

    return app
