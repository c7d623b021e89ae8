"""Module: dpi_helper.py

Author: Michael Economou
Date: 2026-02-02

DPI adaptation utilities for UI element sizing.
Store widgets are laid out in 96 DPI pixels and scaled with ``dpi_scale``.
"""

from PyQt5.QtWidgets import QApplication

from extstore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

BASE_DPI = 96.0


class DPIHelper:
    """Computes the scale factor of the primary screen against 96 DPI."""

    def __init__(self):
        self.scale = 1.0
        self._calculate_scaling()

    def _calculate_scaling(self) -> None:
        app = QApplication.instance()
        if not app:
            logger.warning("[DPI] No QApplication instance found, using default scaling")
            return

        primary_screen = app.primaryScreen()
        if not primary_screen:
            logger.warning("[DPI] No primary screen found, using default scaling")
            return

        logical_dpi = primary_screen.logicalDotsPerInch()
        if logical_dpi > 0:
            self.scale = logical_dpi / BASE_DPI

        logger.debug("[DPI] Logical DPI: %s, scale: %.2f", logical_dpi, self.scale, extra={"dev_only": True})

    def scale_ui_size(self, base_size: int) -> int:
        """Scale a size in 96 DPI pixels to the current screen."""
        return int(round(base_size * self.scale))


# Global instance
_dpi_helper = None


def get_dpi_helper() -> DPIHelper:
    """Return the shared DPIHelper, created on first use."""
    global _dpi_helper
    if _dpi_helper is None:
        _dpi_helper = DPIHelper()
    return _dpi_helper


def dpi_scale(base_size: int) -> int:
    """Convenience function: scale ``base_size`` with the shared helper."""
    return get_dpi_helper().scale_ui_size(base_size)
