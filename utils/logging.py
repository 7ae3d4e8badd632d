"""Logging helpers."""

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for `name`."""
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("spectral_blur")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    if name:
        return _LOGGER.getChild(name)
    return _LOGGER


def set_verbose(verbose: bool) -> None:
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
