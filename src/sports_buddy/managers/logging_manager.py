"""
# Logging Manager

Central place for obtaining loggers. Every module asks for a logger through
`get_logger()`, optionally with a bracketed prefix that tags its component:

```python
from sports_buddy.managers.logging_manager import get_logger

logger = get_logger(prefix="[AccountService]")
logger.info("User registered: %s", email)
# 2025-01-01 12:00:00 [INFO] SportsBuddy: [AccountService] User registered: a@b.co
```

Root handlers are configured once by `setup_logging()`; repeated calls (tests,
reloads) are no-ops.
"""

import logging
from pathlib import Path
from typing import Optional

from sports_buddy.config import settings

DEFAULT_LOGGER_NAME = "SportsBuddy"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


class PrefixedLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that prepends a fixed component prefix to every message."""

    def __init__(self, logger: logging.Logger, prefix: str = ""):
        super().__init__(logger, {})
        self.prefix = prefix

    def process(self, msg, kwargs):
        if self.prefix:
            return f"{self.prefix} {msg}", kwargs
        return msg, kwargs


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the application logger with a console handler and an optional file handler.

    Args:
        level (str): Logging level name, case insensitive.
        log_file (Optional[str]): Path of a file to also write logs to.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(Path(log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True


def get_logger(name: str = DEFAULT_LOGGER_NAME, prefix: str = "") -> PrefixedLoggerAdapter:
    """
    Return a logger for `name`, tagged with `prefix`.

    Child names (e.g. ``"SportsBuddy.requests"``) share the application handlers.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    return PrefixedLoggerAdapter(logging.getLogger(name), prefix)
