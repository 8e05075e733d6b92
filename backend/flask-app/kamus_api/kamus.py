from flask import Blueprint, current_app, jsonify, request

from kamus import IndexUnavailable

from .utils import error_response, json_response, limit_param, word_param

kamus_bp = Blueprint("kamus", __name__)

API_NAME = "KBBI API - Indonesian Dictionary API"
API_VERSION = "2.0.0"
ENDPOINTS = [
    "GET / - API root",
    "GET /api/lookup/:word - Check if word exists",
    "GET /api/word/:word - Get word details",
    "GET /api/check/:word - Check if word is standard form",
    "GET /api/similar/:word - Get similar words (typo suggestions)",
    "GET /api/search?q=query - Search words",
    "GET /api/stats - API statistics",
    "GET /api/health - Health check",
]


def _engine():
    return current_app.extensions["kamus"].get()


def _word_or_none(word):
    norm = word_param(word)
    current_app.logger.info("%s word=%r norm=%r", request.endpoint, word, norm)
    return norm or None


@kamus_bp.get("/")
def index():
    return jsonify({
        "name": API_NAME,
        "version": API_VERSION,
        "description": "Indonesian dictionary API with word lookup, search, and typo suggestions",
        "endpoints": ENDPOINTS,
    })


@kamus_bp.get("/api/lookup/<path:word>")
def lookup(word):
    """
    Returns: { exists: bool, word }
    """
    norm = _word_or_none(word)
    if not norm:
        return error_response("Word parameter is required")
    return json_response(_engine().exists(norm), max_age=current_app.config["KAMUS_CACHE_MAX_AGE"])


@kamus_bp.get("/api/word/<path:word>")
def word_detail(word):
    """
    200: full entry record { status, data: { pranala, entri: [...] } }
    404: { error: "Word not found", word }
    """
    norm = _word_or_none(word)
    if not norm:
        return error_response("Word parameter is required")
    entry = _engine().detail(norm)
    if entry is None:
        return error_response("Word not found", 404, word=norm)
    return json_response(entry, max_age=current_app.config["KAMUS_CACHE_MAX_AGE"])


@kamus_bp.get("/api/check/<path:word>")
def check_standard(word):
    """
    Returns one of:
      { is_standard: true, word, non_standard_forms: [...] }
      { is_standard: false, word, standard_form }
      { is_standard: false, word, exists_in_kbbi: false }
    """
    norm = _word_or_none(word)
    if not norm:
        return error_response("Word parameter is required")
    return jsonify(_engine().classify(norm))


@kamus_bp.get("/api/similar/<path:word>")
def similar(word):
    """
    Query: ?limit=N (default 5)
    200: { word, suggestions: [{word, distance}, ...] }
    500: { error: "Word index not found", suggestions: [] }
    """
    norm = _word_or_none(word)
    if not norm:
        return error_response("Word parameter is required")
    limit = limit_param("KAMUS_SUGGEST_LIMIT")
    try:
        payload = _engine().suggest(norm, limit)
    except IndexUnavailable as e:
        current_app.logger.warning("similar unavailable: %s", e)
        return error_response("Word index not found", 500, suggestions=[])
    return json_response(payload, max_age=current_app.config["KAMUS_CACHE_MAX_AGE"])


@kamus_bp.get("/api/search")
def search():
    """
    Query: ?q=...&limit=N (default 10)
    200: { query, count, results: [word, ...] }
    400: { error: "Query parameter (q) is required" }
    500: { error: "Word index not found", results: [] }
    """
    # literal substring match: lowercase only, spaces and dots are part of the query
    q = request.args.get("q") or ""
    query = q.lower()
    current_app.logger.info("search q=%r norm=%r", q, query)
    if not query:
        return error_response("Query parameter (q) is required")
    limit = limit_param("KAMUS_SEARCH_LIMIT")
    try:
        payload = _engine().search(query, limit)
    except IndexUnavailable as e:
        current_app.logger.warning("search unavailable: %s", e)
        return error_response("Word index not found", 500, results=[])
    return json_response(payload, max_age=current_app.config["KAMUS_SEARCH_CACHE_MAX_AGE"])


@kamus_bp.get("/api/stats")
def stats():
    """
    Returns: { total_words, total_entries, non_standard_forms, api_version, endpoints }
    total_words is 0 when the dataset has not been prepared.
    """
    payload = _engine().stats()
    payload["api_version"] = API_VERSION
    payload["endpoints"] = ENDPOINTS
    return json_response(payload, max_age=current_app.config["KAMUS_CACHE_MAX_AGE"])


@kamus_bp.post("/api/reload")
def reload_dataset():
    """
    Rebuild the engine from the data directory and swap it in.
    Requests already running keep the previous engine.
    """
    if not current_app.config["KAMUS_ENABLE_RELOAD"]:
        return error_response("Not Found", 404)
    try:
        engine = current_app.extensions["kamus"].reload()
    except Exception as e:
        current_app.logger.exception("reload failed: %s", e)
        return error_response(str(e), 500)
    return jsonify({"reloaded": True, "total_words": engine.stats()["total_words"]})
