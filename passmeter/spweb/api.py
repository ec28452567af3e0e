import logging
from typing import Any, Dict, Optional, AbstractSet

from flask import Flask, jsonify, request

from passmeter import __version__
from passmeter.config import load_config, check_policy
from passmeter.dictionary import load_common_passwords
from passmeter.evaluator import evaluate

logger = logging.getLogger(__name__)

BAD_REQUEST_MESSAGE = "The request must include a JSON body with a string 'password' key."

OPENAPI_SPEC = {
    "openapi": "3.0.0",
    "info": {
        "title": "Password Evaluation API",
        "version": __version__,
        "description": "Evaluates password strength from its entropy and a list of common passwords.",
    },
    "paths": {
        "/api/v1/password/evaluate": {
            "post": {
                "summary": "Evaluate the strength of a password",
                "requestBody": {
                    "required": True,
                    "content": {
                        "application/json": {
                            "schema": {
                                "type": "object",
                                "properties": {"password": {"type": "string", "example": "MyS3cure!Passphrase"}},
                                "required": ["password"],
                            }
                        }
                    },
                },
                "responses": {
                    "200": {
                        "description": "Analysis completed.",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "properties": {
                                        "password_length": {"type": "integer", "example": 19},
                                        "keyspace_size": {"type": "integer", "example": 94},
                                        "entropy_bits": {"type": "number", "format": "float", "example": 124.54},
                                        "strength_category": {"type": "string", "example": "Very Strong"},
                                        "is_in_common_list": {"type": "boolean", "example": False},
                                        "estimated_crack_time": {"type": "string", "example": "More than a thousand years"},
                                    },
                                }
                            }
                        },
                    },
                    "400": {
                        "description": "Missing 'password' key or it is not a string.",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "properties": {"error": {"type": "string", "example": BAD_REQUEST_MESSAGE}},
                                }
                            }
                        },
                    },
                },
            }
        }
    },
}


def create_app(config: Optional[Dict[str, Any]] = None, common_passwords: Optional[AbstractSet[str]] = None) -> Flask:
    """
    Build the Flask app. The common-password list is loaded here, once;
    a DictionaryLoadError propagates so the server never starts without it.
    """
    cfg = check_policy(config) if config is not None else load_config()
    if common_passwords is None:
        common_passwords = load_common_passwords(cfg.get("common_passwords_path"))

    app = Flask(__name__)
    app.config["COMMON_PASSWORDS"] = common_passwords
    app.config["ATTACK_RATE"] = cfg.get("attack_rate_per_second")
    app.config["SYMBOL_POOL_SIZE"] = cfg.get("symbol_pool_size")

    @app.route('/')
    def home():
        return "Password evaluation API is running. See /api-docs for the API description.", 200, {
            "Content-Type": "text/plain; charset=utf-8"
        }

    @app.route('/api-docs')
    def api_docs():
        return jsonify(OPENAPI_SPEC)

    @app.route('/api/v1/password/evaluate', methods=['POST'])
    def evaluate_route():
        data = request.get_json(silent=True)
        password = data.get('password') if isinstance(data, dict) else None
        if not password or not isinstance(password, str):
            logger.debug("Rejected evaluate request without a usable password")
            return jsonify({'error': BAD_REQUEST_MESSAGE}), 400

        result = evaluate(
            password,
            app.config["COMMON_PASSWORDS"],
            attack_rate=app.config["ATTACK_RATE"],
            symbol_pool_size=app.config["SYMBOL_POOL_SIZE"],
        )
        return jsonify(result.to_dict())

    return app
