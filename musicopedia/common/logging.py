# musicopedia/common/logging.py
from __future__ import annotations

import logging

ROOT_LOGGER = "musicopedia"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_root(level: int | str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return root


def get_logger(name: str | None = None, level: int | str | None = None) -> logging.Logger:
    """
    Catalog logger under the "musicopedia" hierarchy, e.g.
    `get_logger(__name__)` -> "musicopedia.services.catalog.member_service".
    The shared handler is installed once, at Settings.log_level unless
    `level` is given.
    """
    if level is None:
        from musicopedia.common.settings import get_settings
        level = get_settings().log_level.upper()
    _configure_root(level)
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
