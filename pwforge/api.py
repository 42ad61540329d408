"""
pwforge.api
Small JSON API over the password engine.

POST /generate  {"length": 16, "lower": true, "upper": true, "digits": true,
                 "symbols": true, "avoid_ambiguous": false}
POST /strength  {"classes": 3, "length": 12}

Missing fields fall back to the saved settings (see pwforge.config).
"""

import logging

from flask import Flask, jsonify, request

from .config import load_config, options_from_config
from .errors import PasswordEngineError
from .evaluator import estimate_entropy, evaluate_strength, rate_options
from .generator import build_pool, generate

logger = logging.getLogger(__name__)

FLAG_FIELDS = ("lower", "upper", "digits", "symbols", "avoid_ambiguous")


class InvalidRequest(ValueError):
    pass


def _parse_int(data: dict, key: str, default=None) -> int:
    value = data.get(key, default)
    if value is None:
        raise InvalidRequest(f"'{key}' is required")
    if isinstance(value, bool):
        raise InvalidRequest(f"'{key}' must be an integer")
    if isinstance(value, int):
        return value
    # plain decimal digits only; int() would also take "1_2" or " +12 "
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise InvalidRequest(f"'{key}' must be an integer")


def _json_body() -> dict:
    if not request.get_data():
        return {}
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidRequest("request body is not valid JSON")
    if not isinstance(data, dict):
        raise InvalidRequest("request body must be a JSON object")
    return data


def _parse_flag(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise InvalidRequest(f"'{key}' must be true or false")
    return value


def create_app() -> Flask:
    app = Flask(__name__)

    @app.errorhandler(InvalidRequest)
    @app.errorhandler(PasswordEngineError)
    def handle_bad_input(e):
        logger.info("rejected request to %s: %s", request.path, e)
        return jsonify({"error": str(e)}), 400

    @app.route('/')
    def home():
        return jsonify({"message": "pwforge API is running"})

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = _json_body()
        cfg = load_config()
        length = _parse_int(data, "length", cfg["length"])
        for key in FLAG_FIELDS:
            cfg[key] = _parse_flag(data, key, cfg[key])
        options = options_from_config(cfg)

        pool = build_pool(options)
        password = generate(pool, length)
        return jsonify({
            "password": password,
            "strength": rate_options(options, length).value,
            "entropy_bits": round(estimate_entropy(pool, length), 2),
            "pool_size": len(pool),
        })

    @app.route('/strength', methods=['POST'])
    def strength_route():
        data = _json_body()
        classes = _parse_int(data, "classes")
        length = _parse_int(data, "length")
        return jsonify({"strength": evaluate_strength(classes, length).value})

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
