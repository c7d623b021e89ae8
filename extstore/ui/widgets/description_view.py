"""Module: description_view.py

Author: Michael Economou
Date: 2026-02-02

Read-only HTML pane displaying the description of the selected extension.
"""

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QSizePolicy, QTextBrowser, QWidget

from extstore.config import (
    DESCRIPTION_FONT_FAMILY,
    DESCRIPTION_FONT_SIZE,
    DESCRIPTION_PLACEHOLDER,
)
from extstore.utils.logging.logger_factory import get_cached_logger
from extstore.utils.ui.dpi_helper import dpi_scale

logger = get_cached_logger(__name__)


class DescriptionView(QTextBrowser):
    """HTML view with a fixed font, shrinking to whatever room the panel leaves."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

        self.setMinimumSize(0, 0)
        self.setSizePolicy(QSizePolicy.Maximum, QSizePolicy.Maximum)
        self.setOpenExternalLinks(True)

        font = QFont(DESCRIPTION_FONT_FAMILY)
        font.setPixelSize(dpi_scale(DESCRIPTION_FONT_SIZE))
        self.document().setDefaultFont(font)

        logger.debug(
            "[DescriptionView] Initialized (font: %s %dpx)",
            font.family(),
            font.pixelSize(),
            extra={"dev_only": True},
        )

    def set_description(self, html: str) -> None:
        """Show ``html``, or a placeholder when it is empty."""
        self.setHtml(html or DESCRIPTION_PLACEHOLDER)
