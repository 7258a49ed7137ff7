# cattery/api/v1/media.py
from flask import jsonify, request
from cattery.domain.exceptions import ValidationFailure
from cattery.utils.media import resolve_media_url, save_file
from . import v1_bp


@v1_bp.route("/media", methods=["POST"])
def upload_media():
    if "file" not in request.files:
        raise ValidationFailure("file is required")

    ref = save_file(request.files["file"])
    return jsonify({"ref": ref, "url": resolve_media_url(ref)}), 201
