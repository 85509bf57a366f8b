"""
Application logging configuration.

- App logs: {LOG_DIR}/app.log
- Console: stdout (the startup confirmation line shows up here)
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from app.core.config import get_settings


# Format for log messages
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOG_FILENAME = "app.log"


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """
    Configure the root logger: {log_dir}/app.log plus stdout.

    log_dir and log_level default to the LOG_DIR and LOG_LEVEL settings. Unknown
    level names fall back to INFO. Existing root handlers are replaced, so calling
    this again (e.g. on reload) does not duplicate output.
    """
    settings = get_settings()
    dir_path = Path(log_dir or settings.LOG_DIR)
    dir_path.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    app_file_handler = logging.FileHandler(dir_path / APP_LOG_FILENAME, encoding="utf-8")
    app_file_handler.setLevel(level)
    app_file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates on reload
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
    root_logger.addHandler(app_file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
