from __future__ import annotations

import logging

from flask import Blueprint, Response, abort, current_app, jsonify, request

from css_unity.errors import CSSUnityError
from css_unity.model import OutputType
from css_unity.unity import CSSUnity
from css_unity.uris import absolute_request_uri

logger = logging.getLogger(__name__)

stylesheets_bp = Blueprint("stylesheets", __name__)

_TRUTHY = ("1", "true", "yes", "on")


def _request_uri() -> str:
    """Absolute URI of the current request, used as the MHTML base."""
    path = request.full_path.rstrip("?")
    return absolute_request_uri(
        request.scheme,
        request.environ.get("SERVER_NAME", request.host),
        request.environ.get("SERVER_PORT"),
        path,
    )


def _render(output: OutputType):
    config = current_app.extensions["css_unity_config"]
    stylesheets = current_app.extensions["css_unity_stylesheets"]
    separate = request.args.get("separate", "").lower() in _TRUTHY

    try:
        unity = CSSUnity(stylesheets, config=config)
    except CSSUnityError as exc:
        logger.error("Cannot build stylesheet: %s", exc)
        return jsonify({"error": str(exc)}), 500

    mhtml_uri = config.mhtml_uri or _request_uri()
    text = unity.parse(output, separate=separate, mhtml_uri=mhtml_uri)
    return Response(text, mimetype="text/css")


@stylesheets_bp.route("/css")
def unified():
    """Data URIs and MHTML in one stylesheet."""
    return _render(OutputType.UNIFIED)


@stylesheets_bp.route("/css/<type_name>")
def by_type(type_name: str):
    """One output type: ``datauri``, ``mhtml`` or ``nores``."""
    try:
        output = OutputType(type_name)
    except ValueError:
        abort(404)
    return _render(output)


@stylesheets_bp.route("/health")
def health():
    stylesheets = current_app.extensions["css_unity_stylesheets"]
    return jsonify({"status": "ok", "configured": bool(stylesheets)})
