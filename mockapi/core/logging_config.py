"""Logging setup for the mock API process."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger (idempotent)."""
    root = logging.getLogger("mockapi")
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    if not any(getattr(h, "_mockapi_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._mockapi_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root
