import logging
import os
from datetime import datetime
from typing import Optional, Tuple


LOGGER_NAME = "closestpoint"


def setup_query_logger(log_dir: Optional[str] = None, level: int = logging.DEBUG) -> Tuple[logging.Logger, str]:
    """File logger for the ``closestpoint`` hierarchy; returns the logger and the log path."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

    log_dir = log_dir or os.getcwd()
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f"closest_query_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(file_handler)
    logger.propagate = False

    return logger, log_path
