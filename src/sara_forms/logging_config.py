from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Installs a single stream handler on the ``sara_forms`` logger."""
    root = logging.getLogger("sara_forms")
    root.setLevel(level.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def mask_identifier(value: str, visible: int = 4) -> str:
    """Partially hides an identifier (CPF, phone) before it reaches a log line."""
    if not value:
        return value
    if len(value) <= visible * 2:
        return "***"
    return f"{value[:visible]}***{value[-visible:]}"
