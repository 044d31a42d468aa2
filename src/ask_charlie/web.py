"""
Flask REST API for Ask Charlie.

Thin transport over AskCharlieApp: it owns the clock and the HTTP
shapes, the app owns everything else.
"""
import logging
from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from .app import AskCharlieApp
from .interaction import WELCOME_MESSAGE

logger = logging.getLogger(__name__)


def create_app(charlie_app: Optional[AskCharlieApp]) -> Flask:
    """
    Build the Flask application.

    :param charlie_app: Initialized AskCharlieApp, or None if startup failed
    :return: Flask app
    """
    app = Flask(__name__)

    @app.route("/")
    def index():
        """Greeting sent when a user opens a session."""
        return jsonify({"message": WELCOME_MESSAGE})

    @app.route("/chat", methods=["POST"])
    def chat():
        """Chat endpoint."""
        if charlie_app is None or not charlie_app.is_initialized:
            return jsonify({"error": "Agent not initialized. Please check configuration."}), 500

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get("query"), str):
            return jsonify({"error": "Missing 'query' in request body"}), 400

        today = date.today()
        if data.get("today"):
            try:
                today = date.fromisoformat(str(data["today"]))
            except ValueError:
                return jsonify({"error": "'today' must be an ISO date (YYYY-MM-DD)"}), 400

        try:
            response = charlie_app.chat(data["query"], today=today)
        except Exception as e:
            logger.error(f"Chat endpoint error: {str(e)}", exc_info=True)
            return jsonify({"error": str(e)}), 500

        logger.info(f"Chat query - Intent: {response.intent.name}, Score: {response.score}")
        return jsonify(response.to_dict())

    @app.route("/reload", methods=["POST"])
    def reload():
        """Rebuild the knowledge indexes from their sources."""
        if charlie_app is None or not charlie_app.is_initialized:
            return jsonify({"error": "Agent not initialized. Please check configuration."}), 500

        try:
            snapshot = charlie_app.reload()
        except Exception as e:
            logger.error(f"Reload error: {str(e)}", exc_info=True)
            return jsonify({"error": str(e)}), 500

        return jsonify({"status": "success", **snapshot.sizes()})

    return app
