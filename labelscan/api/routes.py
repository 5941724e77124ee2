from flask import Blueprint, request, jsonify, current_app, send_from_directory, abort
from werkzeug.utils import secure_filename
import logging
import os
import uuid

from ..extract import extract_fields
from ..ocr import OcrError, recognize
from ..spreadsheet import append_row

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _allowed(filename):
    allowed = current_app.config.get("ALLOWED_EXTENSIONS")
    if not allowed or "." not in filename:
        return True
    return filename.rsplit(".", 1)[-1].lower() in allowed


def _error(message, status=400):
    return jsonify({"success": False, "message": message}), status


def _workbook_path():
    cfg = current_app.config
    return os.path.join(cfg["STORAGE_DIR"], cfg["WORKBOOK_NAME"])


def _stored_name(filename):
    name = secure_filename(filename)
    if name and current_app.config.get("UNIQUE_UPLOAD_NAMES"):
        name = f"{uuid.uuid4().hex}_{name}"
    return name


def _image_url(name):
    base = current_app.config.get("PUBLIC_BASE_URL") or request.host_url
    return f"{base.rstrip('/')}/img/{name}"


@api_bp.get("/health")
def health():
    return {"status": "ok"}


@api_bp.post("/upload")
def upload():
    f = request.files.get("file")
    if not f or not f.filename:
        logger.info("No files uploaded")
        return _error("No file uploaded.")
    if not _allowed(f.filename):
        return _error("file type not allowed")
    name = _stored_name(f.filename)
    if not name:
        return _error("invalid filename")

    storage = current_app.config["STORAGE_DIR"]
    path = os.path.join(storage, name)
    try:
        os.makedirs(storage, exist_ok=True)
        f.save(path)
    except OSError:
        logger.exception("Error moving file to %s", path)
        return _error("could not store upload", 500)
    logger.info("File stored at %s", path)

    try:
        result = recognize(path, current_app.config["OCR_LANGUAGE"])
    except OcrError as exc:
        logger.error("Error during OCR: %s", exc)
        return _error("OCR failed", 500)
    logger.debug("OCR text: %s", result["text"])

    record = extract_fields(result["text"])
    saved = append_row(
        _workbook_path(),
        record.to_row(),
        sheet_name=current_app.config["SHEET_NAME"],
        rederive_date=current_app.config["REDERIVE_MANUFACTURING_DATE"],
    )

    url = _image_url(name)
    return jsonify({"image": url, "path": url, "data": record.model_dump(), "saved": saved})


@api_bp.get("/export")
def export():
    path = _workbook_path()
    if not os.path.exists(path):
        abort(404)
    return send_from_directory(
        os.path.abspath(current_app.config["STORAGE_DIR"]),
        current_app.config["WORKBOOK_NAME"],
        as_attachment=True,
    )
