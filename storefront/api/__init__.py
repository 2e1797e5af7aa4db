"""Versioned JSON API; every resource blueprint hangs off ``/api/v1``."""
from flask import Blueprint
from flask_cors import CORS

api_v1 = Blueprint('api_v1', __name__, url_prefix='/api/v1')

CORS(api_v1, resources={
    r"/*": {
        "origins": "*",
        "methods": ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "expose_headers": ["Content-Disposition"],
    }
})

from . import auth, showcase_sections, yt_videos, reviews, invoices

for bp in (
    auth.auth_bp,
    showcase_sections.showcase_bp,
    yt_videos.yt_videos_bp,
    reviews.reviews_bp,
    invoices.invoices_bp,
):
    api_v1.register_blueprint(bp)
