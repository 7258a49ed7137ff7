# cattery/api/v1/hero_videos.py
from flask import jsonify
from cattery.application.hero_videos import hero_videos
from cattery.normalizers.hero_video import normalize_hero_video
from cattery.utils.optimistic_lock import enforce_optimistic_lock
from .params import json_body
from . import v1_bp


@v1_bp.route("/hero-videos", methods=["GET"])
def list_hero_videos():
    return jsonify([normalize_hero_video(v, admin=True) for v in hero_videos.list_all()])


@v1_bp.route("/hero-videos/active", methods=["GET"])
def get_active_hero_video():
    video = hero_videos.get_active()
    return jsonify(normalize_hero_video(video) if video else None)


@v1_bp.route("/hero-videos/stats", methods=["GET"])
def hero_video_stats():
    return jsonify(hero_videos.stats())


@v1_bp.route("/hero-videos/<video_id>", methods=["GET"])
def get_hero_video(video_id):
    return jsonify(normalize_hero_video(hero_videos.get(video_id), admin=True))


@v1_bp.route("/hero-videos", methods=["POST"])
def create_hero_video():
    video = hero_videos.create(json_body({}))
    return jsonify({"id": video.id, "message": "Hero video added successfully"}), 201


@v1_bp.route("/hero-videos/<video_id>", methods=["PATCH"])
def update_hero_video(video_id):
    enforce_optimistic_lock(hero_videos.get(video_id).updated_at)

    video = hero_videos.update_settings(video_id, json_body({}))
    return jsonify(normalize_hero_video(video, admin=True))


@v1_bp.route("/hero-videos/<video_id>/activate", methods=["POST"])
def activate_hero_video(video_id):
    video = hero_videos.activate(video_id)
    return jsonify({"id": video.id, "is_active": True})


@v1_bp.route("/hero-videos/<video_id>/toggle", methods=["POST"])
def toggle_hero_video(video_id):
    is_active = hero_videos.toggle_active(video_id)
    return jsonify({"id": video_id, "is_active": is_active})


@v1_bp.route("/hero-videos/<video_id>", methods=["DELETE"])
def delete_hero_video(video_id):
    hero_videos.delete(video_id)
    return jsonify({"message": "Hero video deleted successfully"}), 200
