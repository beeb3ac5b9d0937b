from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO", fmt: str = DEFAULT_FORMAT) -> None:
    resolved = _coerce_level(level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=resolved, format=fmt)
    root.setLevel(resolved)

    formatter = logging.Formatter(fmt)
    for handler in root.handlers:
        handler.setFormatter(formatter)

    if resolved > logging.DEBUG:
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def _coerce_level(raw_level) -> int:
    if isinstance(raw_level, int):
        return raw_level
    if isinstance(raw_level, str):
        candidate = raw_level.strip().upper()
        level = getattr(logging, candidate, logging.INFO)
        return level if isinstance(level, int) else logging.INFO
    return logging.INFO
