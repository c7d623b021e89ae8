"""Module: icons_loader.py

Author: Michael Economou
Date: 2026-02-02

This module provides icon loading for the store widgets.
Icons are looked up by logical name (see ``ICONS`` in the config) and cached.

Usage:
    from extstore.utils.ui.icons_loader import get_store_icon
    item.setIcon(1, get_store_icon("installed"))
"""

import os

from PyQt5.QtGui import QIcon

from extstore.config import ICONS, ICONS_DIR
from extstore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class StoreIconLoader:
    """Loads the store status icons from the resources directory with caching."""

    def __init__(self, base_dir: str = ICONS_DIR):
        self.base_dir = base_dir
        self.icon_cache: dict[str, QIcon] = {}

    def get_icon_path(self, name: str) -> str:
        """Return the full path of a logical icon, or "" if it does not exist."""
        file_name = ICONS.get(name)
        if not file_name:
            logger.warning("[IconLoader] Unknown icon name: %s", name)
            return ""

        path = os.path.join(self.base_dir, file_name)
        if not os.path.exists(path):
            logger.warning("[IconLoader] Icon file not found: %s", path)
            return ""
        return path

    def load_icon(self, name: str) -> QIcon:
        """Load an icon with caching. Missing icons give an empty QIcon."""
        if name in self.icon_cache:
            return self.icon_cache[name]

        path = self.get_icon_path(name)
        if not path:
            return QIcon()

        icon = QIcon(path)
        self.icon_cache[name] = icon
        logger.debug("[IconLoader] Loaded %s from %s", name, path, extra={"dev_only": True})
        return icon


# Singleton instance for global use
icons_loader = StoreIconLoader()


def get_store_icon(name: str) -> QIcon:
    """Convenience function to get an icon from the global icon loader."""
    return icons_loader.load_icon(name)
