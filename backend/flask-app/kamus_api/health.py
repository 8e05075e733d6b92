from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.get("/api/health")
def health():
    """
    Returns: { status: "ok", ready: bool }
    ready is false until the engine is built, or while its word index is empty.
    """
    holder = current_app.extensions["kamus"]
    ready = holder.loaded and not holder.get().is_empty
    return jsonify({"status": "ok", "ready": ready})
