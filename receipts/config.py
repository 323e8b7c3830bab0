# receipts/config.py
import os
from pathlib import Path

from .constants import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    RECEIPT_TEMPLATE,
    STYLE_FILE,
)

BASE_DIR = Path(__file__).resolve().parent
STYLE_PATH = BASE_DIR / STYLE_FILE
RECEIPT_TEMPLATE_PATH = BASE_DIR / RECEIPT_TEMPLATE


def log_level() -> str:
    """Log level name from the environment, falling back to the default."""
    level = (os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    return level or DEFAULT_LOG_LEVEL
