# camerabot/utils/logging_config.py

import logging
from logging.handlers import RotatingFileHandler

from camerabot.config import LOG_FILE

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Consistent logger name for the whole bot; module loggers are its children
logger = logging.getLogger("camerabot")


def setup_logging(log_file=LOG_FILE, level=logging.INFO):
    """Attach a rotating file handler and a console handler to the root logger.

    Calling it again is a no-op.
    """
    root = logging.getLogger()
    if any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        return logger
    formatter = logging.Formatter(LOG_FORMAT)
    # Rotate so the log file cannot grow indefinitely
    file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    stream_handler = logging.StreamHandler()
    for handler in (file_handler, stream_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # httpx logs every Telegram API poll at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
