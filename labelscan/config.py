import os

def _get_env(key, default=None):
    return os.getenv(key, default)

def _get_bool(key, default="false"):
    return _get_env(key, default).strip().lower() in {"1", "true", "yes", "on"}

class Config:
    STORAGE_DIR = _get_env("STORAGE_DIR", "storage")
    WORKBOOK_NAME = _get_env("WORKBOOK_NAME", "ocr_data.xlsx")
    SHEET_NAME = _get_env("SHEET_NAME", "Sheet1")

    OCR_LANGUAGE = _get_env("OCR_LANGUAGE", "eng")
    TESSERACT_CMD = _get_env("TESSERACT_CMD")

    # e.g. http://localhost:5000 ; empty means "use the request host"
    PUBLIC_BASE_URL = _get_env("PUBLIC_BASE_URL", "")
    UNIQUE_UPLOAD_NAMES = _get_bool("UNIQUE_UPLOAD_NAMES")
    REDERIVE_MANUFACTURING_DATE = _get_bool("REDERIVE_MANUFACTURING_DATE", "true")

    MAX_CONTENT_LENGTH = int(float(_get_env("MAX_UPLOAD_MB", "10")) * 1024 * 1024)
    # empty accepts every upload; unreadable images fail in OCR
    ALLOWED_EXTENSIONS = {
        e.strip().lower() for e in _get_env("ALLOWED_EXTENSIONS", "").split(",") if e.strip()
    }

    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    HOST = _get_env("HOST", "0.0.0.0")
    PORT = int(_get_env("PORT", "5000"))
