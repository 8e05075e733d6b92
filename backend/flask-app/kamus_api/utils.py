from flask import current_app, jsonify, request

from kamus import normalize_word


def word_param(word: str) -> str:
    """Normalized path/query word ('' when nothing usable is left)."""
    return normalize_word(word)


def limit_param(default_key: str) -> int:
    """
    ?limit=N from the query string, clamped to [0, KAMUS_MAX_LIMIT].
    Missing or non-integer values fall back to the configured default.
    """
    default = current_app.config[default_key]
    limit = request.args.get("limit", type=int)
    if limit is None:
        limit = default
    return max(0, min(limit, current_app.config["KAMUS_MAX_LIMIT"]))


def json_response(payload, status: int = 200, max_age: int = None):
    """jsonify with an optional public Cache-Control header."""
    resp = jsonify(payload)
    resp.status_code = status
    if max_age:
        resp.headers["Cache-Control"] = f"public, max-age={int(max_age)}"
    return resp


def error_response(message: str, status: int = 400, **extra):
    payload = {"error": message}
    payload.update(extra)
    return jsonify(payload), status
