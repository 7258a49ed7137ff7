# cattery/api/v1/awards.py
from flask import jsonify, request
from cattery.application.awards import awards
from cattery.normalizers.award import normalize_award
from cattery.utils.optimistic_lock import enforce_optimistic_lock
from .params import int_arg, json_body
from . import v1_bp


@v1_bp.route("/awards", methods=["GET"])
def list_awards():
    return jsonify([normalize_award(a, admin=True) for a in awards.list_all()])


@v1_bp.route("/awards/published", methods=["GET"])
def list_published_awards():
    items = awards.list_published(
        category=request.args.get("category") or None,
        limit=int_arg("limit"),
    )
    return jsonify([normalize_award(a) for a in items])


@v1_bp.route("/awards/categories", methods=["GET"])
def award_categories():
    return jsonify(awards.category_counts())


@v1_bp.route("/awards/by-cat/<cat_id>", methods=["GET"])
def awards_for_cat(cat_id):
    return jsonify([normalize_award(a) for a in awards.list_for_cat(cat_id)])


@v1_bp.route("/awards/<award_id>", methods=["GET"])
def get_award(award_id):
    return jsonify(normalize_award(awards.get(award_id), admin=True))


@v1_bp.route("/awards", methods=["POST"])
def create_award():
    award = awards.create(json_body({}))
    return jsonify({"id": award.id, "message": "Award created successfully"}), 201


@v1_bp.route("/awards/<award_id>", methods=["PATCH"])
def update_award(award_id):
    enforce_optimistic_lock(awards.get(award_id).updated_at)

    award = awards.update(award_id, json_body({}))
    return jsonify(normalize_award(award, admin=True))


@v1_bp.route("/awards/<award_id>/toggle", methods=["POST"])
def toggle_award(award_id):
    is_published = awards.toggle_publication(award_id)
    return jsonify({"id": award_id, "is_published": is_published})


@v1_bp.route("/awards/<award_id>", methods=["DELETE"])
def delete_award(award_id):
    awards.delete(award_id)
    return jsonify({"message": "Award deleted successfully"}), 200


@v1_bp.route("/awards/reorder", methods=["POST"])
def reorder_awards():
    applied = awards.reorder(json_body())
    return jsonify({"count": len(applied), "message": "Awards reordered"}), 200
