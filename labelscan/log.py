import logging

from pythonjsonlogger.json import JsonFormatter


def configure_logging(level="INFO"):
    """Install a JSON stream handler on the root logger.

    Calling it again replaces only the handler installed here, so handlers
    added by other code (test harnesses, gunicorn) are left alone.
    """
    logger = logging.getLogger()
    for h in list(logger.handlers):
        if getattr(h, "_labelscan", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    handler._labelscan = True
    logger.addHandler(handler)
    logger.setLevel(str(level).upper())
    return handler
