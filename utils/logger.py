# utils/logger.py
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union
from dotenv import load_dotenv
from config.paths import LOG_PATH

load_dotenv()

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
STREAM_FORMAT = "[%(levelname)s] %(message)s"


def configure_logger(
    name: str = "ward",
    level: Optional[str] = None,
    log_path: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Return the named logger with a file handler and a stdout handler attached.

    `level` falls back to WARD_LOG_LEVEL (default INFO) and `log_path` to
    WARD_LOG_PATH (default logs/ward_run.log). Handlers are attached once per
    logger; later calls only update the level.
    """
    level = (level or os.getenv("WARD_LOG_LEVEL") or "INFO").upper()
    log_path = Path(log_path or os.getenv("WARD_LOG_PATH") or LOG_PATH)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers if configured more than once
    if logger.handlers:
        return logger

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    # stdout -> docker logs
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(STREAM_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)
    return logger


logger = configure_logger()
