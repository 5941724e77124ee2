import logging

import pytesseract
from flask import Flask

from .config import Config
from .log import configure_logging

logger = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config["LOG_LEVEL"])

    if app.config.get("TESSERACT_CMD"):
        pytesseract.pytesseract.tesseract_cmd = app.config["TESSERACT_CMD"]

    # Register blueprints
    from .api.routes import api_bp
    from .web.routes import web_bp
    app.register_blueprint(api_bp)
    app.register_blueprint(web_bp)

    logger.info("App created, storage at %s", app.config["STORAGE_DIR"])
    return app
