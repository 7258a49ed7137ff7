from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import announcements
from . import awards
from . import gallery
from . import hero_images
from . import hero_videos
from . import settings
from . import media
from . import audit
