# cattery/api/v1/hero_images.py
from flask import jsonify
from cattery.application.hero_images import hero_images
from cattery.normalizers.hero_image import normalize_hero_image
from cattery.utils.optimistic_lock import enforce_optimistic_lock
from .params import json_body
from . import v1_bp


@v1_bp.route("/hero-images", methods=["GET"])
def list_hero_images():
    return jsonify([normalize_hero_image(i, admin=True) for i in hero_images.list_all()])


@v1_bp.route("/hero-images/active", methods=["GET"])
def list_active_hero_images():
    return jsonify([normalize_hero_image(i) for i in hero_images.list_active()])


@v1_bp.route("/hero-images/<image_id>", methods=["GET"])
def get_hero_image(image_id):
    return jsonify(normalize_hero_image(hero_images.get(image_id), admin=True))


@v1_bp.route("/hero-images", methods=["POST"])
def create_hero_image():
    image = hero_images.create(json_body({}))
    return jsonify({"id": image.id, "message": "Hero image added successfully"}), 201


@v1_bp.route("/hero-images/<image_id>", methods=["PATCH"])
def update_hero_image(image_id):
    enforce_optimistic_lock(hero_images.get(image_id).updated_at)

    image = hero_images.update(image_id, json_body({}))
    return jsonify(normalize_hero_image(image, admin=True))


@v1_bp.route("/hero-images/<image_id>/toggle", methods=["POST"])
def toggle_hero_image(image_id):
    is_active = hero_images.toggle_active(image_id)
    return jsonify({"id": image_id, "is_active": is_active})


@v1_bp.route("/hero-images/<image_id>/move", methods=["POST"])
def move_hero_image(image_id):
    body = json_body({})
    direction = body.get("direction") if isinstance(body, dict) else None

    moved = hero_images.move(image_id, direction)
    return jsonify({"id": image_id, "moved": moved})


@v1_bp.route("/hero-images/<image_id>", methods=["DELETE"])
def delete_hero_image(image_id):
    hero_images.delete(image_id)
    return jsonify({"message": "Hero image deleted successfully"}), 200


@v1_bp.route("/hero-images/reorder", methods=["POST"])
def reorder_hero_images():
    applied = hero_images.reorder(json_body())
    return jsonify({"count": len(applied), "message": "Hero images reordered"}), 200
