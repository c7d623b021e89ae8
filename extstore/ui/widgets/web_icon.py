"""Module: web_icon.py

Author: Michael Economou
Date: 2026-02-02

Icons downloaded from a URL and set on tree items once they arrive.

Downloads go through a shared QNetworkAccessManager, so they need a running
Qt event loop. Each URL is downloaded once per process; later WebIcons for
the same URL reuse the cached QIcon.

Usage:
    icon = WebIcon("https://example.com/icon.png")
    icon.loaded.connect(on_loaded)
    icon.set_to_item(item, 0)
"""

from PyQt5.QtCore import QUrl
from PyQt5.QtGui import QIcon, QPixmap
from PyQt5.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest
from PyQt5.QtWidgets import QTreeWidgetItem

from extstore.config import WEB_ICON_MAX_BYTES
from extstore.utils.events import Signal
from extstore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_network_manager: QNetworkAccessManager | None = None
_icon_cache: dict[str, QIcon] = {}


def get_network_manager() -> QNetworkAccessManager:
    """Return the shared network manager, created on first use."""
    global _network_manager
    if _network_manager is None:
        _network_manager = QNetworkAccessManager()
    return _network_manager


def clear_icon_cache() -> None:
    _icon_cache.clear()


class WebIcon:
    """An icon fetched from ``url``.

    Signals:
        loaded(QIcon): the icon is available (emitted once)
        failed(str): the download failed or did not contain an image
    """

    def __init__(self, url: str):
        self.url = url
        self.icon: QIcon | None = None
        self.loaded = Signal(QIcon, name="WebIcon.loaded")
        self.failed = Signal(str, name="WebIcon.failed")
        self._targets: list[tuple[QTreeWidgetItem, int]] = []
        self._reply: QNetworkReply | None = None

    def set_to_item(self, item: QTreeWidgetItem, column: int = 0) -> None:
        """Set the icon on ``item`` now if available, otherwise once downloaded."""
        if self.icon is not None:
            item.setIcon(column, self.icon)
            return
        self._targets.append((item, column))
        self.fetch()

    def fetch(self) -> None:
        """Start the download unless the icon is cached or already downloading."""
        cached = _icon_cache.get(self.url)
        if cached is not None:
            self._set_icon(cached)
            return
        if self._reply is not None:
            return

        logger.debug("[WebIcon] Downloading %s", self.url, extra={"dev_only": True})
        request = QNetworkRequest(QUrl(self.url))
        request.setAttribute(QNetworkRequest.FollowRedirectsAttribute, True)
        self._reply = get_network_manager().get(request)
        self._reply.finished.connect(self._on_reply_finished)

    def _on_reply_finished(self) -> None:
        reply, self._reply = self._reply, None
        if reply is None:
            return

        try:
            if reply.error() != QNetworkReply.NoError:
                self._fail(reply.errorString())
                return

            data = reply.readAll()
        finally:
            reply.deleteLater()

        if data.size() > WEB_ICON_MAX_BYTES:
            self._fail(f"icon is too large ({data.size()} bytes)")
            return

        pixmap = QPixmap()
        if not pixmap.loadFromData(data):
            self._fail("data is not a supported image")
            return

        icon = QIcon(pixmap)
        _icon_cache[self.url] = icon
        self._set_icon(icon)

    def _set_icon(self, icon: QIcon) -> None:
        self.icon = icon
        targets, self._targets = self._targets, []
        for item, column in targets:
            try:
                item.setIcon(column, icon)
            except RuntimeError:
                # item deleted while the download was running
                logger.debug("[WebIcon] Item gone before %s arrived", self.url, extra={"dev_only": True})
        self.loaded.emit(icon)

    def _fail(self, reason: str) -> None:
        logger.warning("[WebIcon] Could not load icon from %s: %s", self.url, reason)
        self._targets = []
        self.failed.emit(reason)
