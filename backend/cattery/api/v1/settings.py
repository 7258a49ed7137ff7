# cattery/api/v1/settings.py
from flask import jsonify
from cattery.application import settings as site_settings
from cattery.normalizers.setting import normalize_setting
from .params import json_body
from . import v1_bp


@v1_bp.route("/settings", methods=["GET"])
def list_settings():
    return jsonify([normalize_setting(s) for s in site_settings.list_settings()])


@v1_bp.route("/settings/type/<setting_type>", methods=["GET"])
def list_settings_by_type(setting_type):
    return jsonify([
        normalize_setting(s) for s in site_settings.list_settings_by_type(setting_type)
    ])


@v1_bp.route("/settings/key/<key>", methods=["GET"])
def get_setting(key):
    return jsonify(normalize_setting(site_settings.get_setting(key)))


@v1_bp.route("/settings/social-media", methods=["GET"])
def social_media_settings():
    return jsonify(site_settings.grouped_settings("social_media"))


@v1_bp.route("/settings/location", methods=["GET"])
def location_settings():
    return jsonify(site_settings.grouped_settings("location"))


@v1_bp.route("/settings", methods=["PUT"])
def upsert_setting():
    setting = site_settings.upsert_setting(json_body({}))
    return jsonify(normalize_setting(setting)), 200


@v1_bp.route("/settings/social-media", methods=["PUT"])
def update_social_media_settings():
    return jsonify({"updated": site_settings.update_social_media(json_body({}))})


@v1_bp.route("/settings/location", methods=["PUT"])
def update_location_settings():
    return jsonify({"updated": site_settings.update_location(json_body({}))})


@v1_bp.route("/settings/defaults", methods=["POST"])
def initialize_default_settings():
    inserted = site_settings.initialize_default_settings()
    return jsonify([normalize_setting(s) for s in inserted]), 200


@v1_bp.route("/settings/<setting_id>", methods=["DELETE"])
def delete_setting(setting_id):
    site_settings.delete_setting(setting_id)
    return jsonify({"message": "Setting deleted successfully"}), 200
