# cattery/api/v1/announcements.py
from flask import jsonify
from cattery.application.announcements import announcements, DEFAULT_LATEST_LIMIT
from cattery.normalizers.announcement import normalize_announcement
from cattery.utils.optimistic_lock import enforce_optimistic_lock
from .params import int_arg, json_body
from . import v1_bp


@v1_bp.route("/announcements", methods=["GET"])
def list_announcements():
    return jsonify([
        normalize_announcement(a, admin=True) for a in announcements.list_all()
    ])


@v1_bp.route("/announcements/published", methods=["GET"])
def list_published_announcements():
    return jsonify([
        normalize_announcement(a) for a in announcements.list_published()
    ])


@v1_bp.route("/announcements/latest", methods=["GET"])
def latest_announcements():
    limit = int_arg("limit", DEFAULT_LATEST_LIMIT)
    return jsonify([
        normalize_announcement(a) for a in announcements.latest(limit)
    ])


@v1_bp.route("/announcements/<announcement_id>", methods=["GET"])
def get_announcement(announcement_id):
    return jsonify(normalize_announcement(announcements.get(announcement_id), admin=True))


@v1_bp.route("/announcements", methods=["POST"])
def create_announcement():
    announcement = announcements.create(json_body({}))

    return jsonify({
        "id": announcement.id,
        "message": "Announcement created successfully"
    }), 201


@v1_bp.route("/announcements/<announcement_id>", methods=["PATCH"])
def update_announcement(announcement_id):
    enforce_optimistic_lock(announcements.get(announcement_id).updated_at)

    announcement = announcements.update(announcement_id, json_body({}))
    return jsonify(normalize_announcement(announcement, admin=True))


@v1_bp.route("/announcements/<announcement_id>/toggle", methods=["POST"])
def toggle_announcement(announcement_id):
    is_published = announcements.toggle_publication(announcement_id)
    return jsonify({"id": announcement_id, "is_published": is_published})


@v1_bp.route("/announcements/<announcement_id>", methods=["DELETE"])
def delete_announcement(announcement_id):
    announcements.delete(announcement_id)
    return jsonify({"message": "Announcement deleted successfully"}), 200


@v1_bp.route("/announcements/reorder", methods=["POST"])
def reorder_announcements():
    applied = announcements.reorder(json_body())
    return jsonify({"count": len(applied), "message": "Announcements reordered"}), 200
