import os
import uuid
from flask import current_app

from cattery.domain.exceptions import ValidationFailure

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp', 'mp4', 'mov', 'webm'}

STORAGE_SCHEME = "storage://"

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS

def upload_folder():
    folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    if not os.path.isabs(folder):
        folder = os.path.join(current_app.instance_path, folder)
    return folder

def save_file(file):
    """
    Store an uploaded file and return its storage reference.
    """
    if not file or not file.filename or not allowed_file(file.filename):
        raise ValidationFailure("File type not allowed")

    # stored under a generated name, only the extension of the upload is kept
    ext = file.filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    folder = upload_folder()
    os.makedirs(folder, exist_ok=True)
    file.save(os.path.join(folder, unique_filename))

    return f"{STORAGE_SCHEME}{unique_filename}"


def resolve_media_url(ref):
    """
    Turn a storage:// reference into a public URL. Other values
    (external URLs, None) are returned unchanged.
    """
    if not ref or not ref.startswith(STORAGE_SCHEME):
        return ref

    base_url = current_app.config.get('MEDIA_BASE_URL', '/media').rstrip('/')
    return f"{base_url}/{ref[len(STORAGE_SCHEME):]}"
