"""
Flask server for the keycalc JSON API.

Each session holds one calculator engine; clients send key labels and read
back the accumulator and result text.
"""

import logging
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify, request

from ..config import Settings
from ..errors import InvalidKeyError
from ..tokens import keypad
from . import sessions
from .services import evaluate_expression, extract_keys, state_payload

logger = logging.getLogger(__name__)

api = Blueprint("api", __name__, url_prefix="/api")


def create_app(settings: Optional[Settings] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        settings: Runtime settings; read from KEYCALC_* variables when omitted

    Returns:
        Flask app with settings stored under app.config["KEYCALC_SETTINGS"]
    """
    flask_app = Flask(__name__)
    flask_app.config["KEYCALC_SETTINGS"] = settings if settings is not None else Settings.from_env()
    flask_app.register_blueprint(api)
    return flask_app


def _settings() -> Settings:
    return current_app.config["KEYCALC_SETTINGS"]


def _session_not_found():
    return jsonify({"error": "Session not found"}), 404


@api.route("/health", methods=["GET"])
def health():
    return jsonify({"ok": True})


@api.route("/keypad", methods=["GET"])
def get_keypad():
    """
    Keypad layout, top row first.

    Returns:
        {"rows": [["7", "8", "9", "/"], ...]}
    """
    return jsonify(keypad())


@api.route("/sessions", methods=["GET"])
def list_sessions():
    """
    List live sessions, oldest first.

    Returns:
        {"sessions": [{"session_id": "...", "created_at": "...", "key_count": 3}, ...]}
    """
    return jsonify({"sessions": sessions.list_sessions()})


@api.route("/sessions", methods=["POST"])
def create_session():
    """
    Create a new calculator session.

    Returns:
        {"session_id": "...", "accumulator": "", "result": "", ...}
    """
    session_id, state = sessions.create_session(max_sessions=_settings().max_sessions)
    return jsonify(state_payload(state, session_id)), 201


@api.route("/sessions/<session_id>", methods=["GET"])
def get_session(session_id: str):
    state = sessions.get_state(session_id)
    if state is None:
        return _session_not_found()
    return jsonify(state_payload(state, session_id))


@api.route("/sessions/<session_id>/keys", methods=["POST"])
def press_keys(session_id: str):
    """
    Press one or more keys.

    Expected JSON payload:
        {"key": "7"}  or  {"keys": ["1", "+", "2", "="]}

    Returns:
        {
            "session_id": "...",
            "accumulator": "1 + 2 = 3",
            "result": "3",
            "tokens": ["1", "+", "2"],
            "mode": "entering|evaluated",
            "is_error": false
        }
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "No JSON data provided"}), 400

    try:
        keys = extract_keys(data)
    except InvalidKeyError as e:
        return jsonify({"error": str(e), "key": e.key}), 400
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    state = sessions.press_keys(session_id, keys)
    if state is None:
        return _session_not_found()
    return jsonify(state_payload(state, session_id))


@api.route("/sessions/<session_id>/clear", methods=["POST"])
def clear_session(session_id: str):
    state = sessions.clear_session(session_id)
    if state is None:
        return _session_not_found()
    return jsonify(state_payload(state, session_id))


@api.route("/sessions/<session_id>", methods=["DELETE"])
def delete_session(session_id: str):
    if not sessions.delete_session(session_id):
        return _session_not_found()
    return jsonify({"ok": True})


@api.route("/evaluate", methods=["POST"])
def evaluate():
    """
    Evaluate a space-separated expression without a session.

    Expected JSON payload:
        {"expression": "2 + 3 * 4"}

    Returns:
        {"expression": "2 + 3 * 4", "result": "14"}
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"error": "No JSON data provided"}), 400

    expression = data.get("expression")
    if not isinstance(expression, str):
        return jsonify({"error": "expression is required"}), 400

    return jsonify(evaluate_expression(expression))


def run_server(settings: Settings) -> None:
    """Run the Flask development server with the given settings."""
    flask_app = create_app(settings)
    logger.info("Starting keycalc server on http://%s:%s", settings.host, settings.port)
    flask_app.run(host=settings.host, port=settings.port, debug=settings.debug)
