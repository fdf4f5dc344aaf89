import os
import sys
from typing import Any, Dict, List

from loguru import logger

from config import log_config

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <7}</level> | {name}:{line} | <level>{message}</level>"


def configure_logging(settings: Dict[str, Any] = log_config) -> List[int]:
    """Replace loguru's sinks with stderr plus an optional rotating file.

    Returns the ids of the added sinks.
    """
    logger.remove()
    sinks = [logger.add(sys.stderr, format=LOG_FORMAT, level=settings["LEVEL"])]

    if settings["TO_FILE"]:
        log_dir = os.path.dirname(settings["FILE_PATH"])
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        sinks.append(logger.add(
            settings["FILE_PATH"],
            format=LOG_FORMAT,
            level=settings["LEVEL"],
            rotation=settings["ROTATION"],
            retention=settings["RETENTION"],
        ))
    return sinks


configure_logging()
