import logging
import os
from logging.handlers import RotatingFileHandler

from resource_hub.platform.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_file_path() -> str:
    log_dir = settings.LOG_DIR or os.path.join(os.getcwd(), "logs")
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, "resource_hub.log")


def get_logger(name: str) -> logging.Logger:
    """
    Named logger that writes to the console and to a rotating file
    under ``LOG_DIR``. Repeated calls return the same configured logger.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    logger.setLevel(level)
    # handlers are attached here, so records must not reach the root logger too
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(_log_file_path(), maxBytes=10_000_000, backupCount=5)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
