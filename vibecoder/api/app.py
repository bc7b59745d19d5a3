"""
Flask application factory for the Vibe Coder API.
"""

import atexit
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .routes import improve_bp
from ..core.config import AppConfig, load_config
from ..providers import ProviderChain, build_default_chain
from ..synthesizer import BriefSynthesizer
from ..utils.logger import get_logger, log_exception

logger = get_logger(__name__)

API_PREFIX = "/api/v1"


def create_app(
    config: Optional[AppConfig] = None,
    chain: Optional[ProviderChain] = None,
    synthesizer: Optional[BriefSynthesizer] = None,
) -> Flask:
    """
    Build the Flask application.

    Configuration is resolved once here and stays fixed for the life
    of the app.

    Args:
        config: Application configuration (loaded from file/env if None)
        chain: Provider chain (built from config if None)
        synthesizer: Local brief generator (default catalog if None)

    Returns:
        Configured Flask app
    """
    if config is None:
        load_dotenv(find_dotenv(usecwd=True))
        config = load_config()

    app = Flask(__name__)
    app.config["VIBECODER"] = config

    origins = config.server.allowed_origins
    CORS(
        app,
        resources={r"/*": {"origins": origins}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        send_wildcard=origins == "*",
    )

    app.extensions["vibecoder.synthesizer"] = synthesizer or BriefSynthesizer()
    if chain is None:
        chain = build_default_chain(config)
        atexit.register(chain.close)
    app.extensions["vibecoder.chain"] = chain

    app.register_blueprint(improve_bp, url_prefix=API_PREFIX)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if isinstance(error, HTTPException):
            return error
        log_exception(logger, "Unhandled error", error)
        return jsonify({"error": "Something went wrong!"}), 500

    return app
