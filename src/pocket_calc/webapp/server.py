"""
Flask JSON adapter for the calculator core.

Forwards key symbols into per-session buffers and reads the display back.
The display only ever shows the "Error" marker; `/api/evaluate` is the one
route that reports the failure kind.
"""

import logging
import os

from flask import Flask, jsonify, request

from ..config import CalculatorConfig, configure_logging
from ..evaluator import try_evaluate
from . import sessions

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Configuration
CONFIG = CalculatorConfig.from_env()


def _not_found(session_id: str):
    return jsonify({"error": f"Session not found: {session_id}"}), 404


@app.route("/api/sessions", methods=["POST"])
def create_session():
    """
    Create a new calculator session.

    Returns:
        {"session_id": "...", "display": "0"}
    """
    session_id = sessions.create_session(CONFIG)
    return jsonify({"session_id": session_id, "display": "0"}), 201


@app.route("/api/sessions", methods=["GET"])
def list_sessions():
    return jsonify({"sessions": sessions.list_sessions()})


@app.route("/api/sessions/<session_id>", methods=["GET"])
def get_session(session_id: str):
    """
    Get the current display.

    Returns:
        {"session_id": "...", "display": "...", "error": null | "<kind>", "created_at": "..."}
    """
    info = sessions.get_session(session_id)
    if not info:
        return _not_found(session_id)
    return jsonify(info)


@app.route("/api/sessions/<session_id>", methods=["DELETE"])
def delete_session(session_id: str):
    if not sessions.delete_session(session_id):
        return _not_found(session_id)
    return jsonify({"ok": True})


@app.route("/api/sessions/<session_id>/keys", methods=["POST"])
def press_keys(session_id: str):
    """
    Submit key or button symbols to a session.

    Expected JSON payload, either of:
        {"symbol": "7"}
        {"symbols": ["2", "+", "3", "="]}

    Returns:
        The session snapshot after all symbols were applied
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not data:
        return jsonify({"error": "Expected a non-empty JSON object"}), 400

    if "symbols" in data:
        symbols = data["symbols"]
    elif "symbol" in data:
        symbols = [data["symbol"]]
    else:
        return jsonify({"error": "symbol or symbols is required"}), 400

    if not isinstance(symbols, list) or not all(isinstance(s, str) for s in symbols):
        return jsonify({"error": "symbols must be a list of strings"}), 400

    info = sessions.press_keys(session_id, symbols)
    if not info:
        return _not_found(session_id)
    return jsonify(info)


@app.route("/api/sessions/<session_id>/reset", methods=["POST"])
def reset_session(session_id: str):
    editor = sessions.get_editor(session_id)
    if not editor:
        return _not_found(session_id)
    editor.clear()
    return jsonify(sessions.get_session(session_id))


@app.route("/api/evaluate", methods=["POST"])
def evaluate_expression():
    """
    Evaluate an expression without touching any session.

    Expected JSON payload:
        {"expression": "2+3×4"}

    Returns:
        {"result": "14"} or {"error": "<kind>", "message": "..."} with status 422
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict) or not data:
        return jsonify({"error": "Expected a non-empty JSON object"}), 400

    expression = data.get("expression")
    if not isinstance(expression, str):
        return jsonify({"error": "expression is required"}), 400

    result, err = try_evaluate(expression, CONFIG)
    if err is not None:
        logger.info("Rejected expression %r: %s", expression, err.kind)
        return jsonify({"error": err.kind, "message": str(err)}), 422

    return jsonify({"result": result})


def main():
    """Run the Flask development server."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the pocket-calc web server")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("POCKET_CALC_PORT", "5000")),
        help="Port to bind to (default: 5000)",
    )

    args = parser.parse_args()

    configure_logging(CONFIG.log_level)
    logger.info("Starting pocket-calc web server on http://%s:%s", args.host, args.port)

    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
