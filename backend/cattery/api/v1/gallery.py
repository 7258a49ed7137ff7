# cattery/api/v1/gallery.py
from flask import jsonify, request
from cattery.application.gallery import gallery
from cattery.normalizers.gallery import normalize_gallery_item
from cattery.utils.optimistic_lock import enforce_optimistic_lock
from .params import json_body
from . import v1_bp


@v1_bp.route("/gallery", methods=["GET"])
def list_gallery_items():
    return jsonify([normalize_gallery_item(i, admin=True) for i in gallery.list_all()])


@v1_bp.route("/gallery/published", methods=["GET"])
def list_published_gallery_items():
    items = gallery.list_published(category=request.args.get("category") or None)
    return jsonify([normalize_gallery_item(i) for i in items])


@v1_bp.route("/gallery/categories", methods=["GET"])
def gallery_categories():
    return jsonify(gallery.category_counts())


@v1_bp.route("/gallery/<item_id>", methods=["GET"])
def get_gallery_item(item_id):
    return jsonify(normalize_gallery_item(gallery.get(item_id), admin=True))


@v1_bp.route("/gallery", methods=["POST"])
def create_gallery_item():
    item = gallery.create(json_body({}))
    return jsonify({"id": item.id, "message": "Gallery item created successfully"}), 201


@v1_bp.route("/gallery/<item_id>", methods=["PATCH"])
def update_gallery_item(item_id):
    enforce_optimistic_lock(gallery.get(item_id).updated_at)

    item = gallery.update(item_id, json_body({}))
    return jsonify(normalize_gallery_item(item, admin=True))


@v1_bp.route("/gallery/<item_id>/toggle", methods=["POST"])
def toggle_gallery_item(item_id):
    is_published = gallery.toggle_publication(item_id)
    return jsonify({"id": item_id, "is_published": is_published})


@v1_bp.route("/gallery/<item_id>", methods=["DELETE"])
def delete_gallery_item(item_id):
    gallery.delete(item_id)
    return jsonify({"message": "Gallery item deleted successfully"}), 200


@v1_bp.route("/gallery/reorder", methods=["POST"])
def reorder_gallery_items():
    applied = gallery.reorder(json_body())
    return jsonify({"count": len(applied), "message": "Gallery reordered"}), 200
