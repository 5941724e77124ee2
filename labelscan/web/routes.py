import os

from flask import Blueprint, current_app, send_from_directory

web_bp = Blueprint("web", __name__)


@web_bp.get("/img/<path:filename>")
def image(filename):
    storage = os.path.abspath(current_app.config["STORAGE_DIR"])
    return send_from_directory(storage, filename)
