"""
Logging setup driven by ``Settings``.

``setup_logging`` applies ``LOG_LEVEL`` to the root logger on every
call, so an app created with different settings (or a test) changes
the level even when handlers are already installed.  A console
handler is attached once per process; a file handler is attached for
``LOG_FILE`` unless one for the same path exists already.
"""

import logging
from pathlib import Path

from .config import Settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks the console handler installed here, as opposed to handlers
# added by pytest or an embedding program.
_CONSOLE_HANDLER_NAME = "guest_list_api.console"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the root logger from ``settings`` and return it.

    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file).resolve()
        existing = [
            h for h in root.handlers
            if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path
        ]
        if not existing:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return root
