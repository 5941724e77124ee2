"""OCR of uploaded label images via pytesseract."""
import logging

import pytesseract
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class OcrError(Exception):
    """Raised when an image cannot be read or tesseract fails."""


def _log_progress(message):
    logger.debug("ocr progress", extra=message)


def recognize(image_path: str, language: str = "eng", progress=None):
    """Run tesseract over ``image_path`` and return ``{"text", "language"}``.

    ``progress`` is called with ``{"status": str, "progress": float}`` dicts
    as the job advances; by default they are logged at DEBUG.
    """
    progress = progress or _log_progress
    try:
        progress({"status": "loading image", "progress": 0.0})
        with Image.open(image_path) as im:
            progress({"status": "recognizing text", "progress": 0.0})
            text = pytesseract.image_to_string(im, lang=language)
    except (OSError, UnidentifiedImageError, pytesseract.TesseractError, RuntimeError) as exc:
        raise OcrError(f"OCR failed for {image_path}: {exc}") from exc
    progress({"status": "recognizing text", "progress": 1.0})
    return {"text": text, "language": language}
