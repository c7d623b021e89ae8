"""Module: store_panel.py

Author: Michael Economou
Date: 2026-02-02

The extension store panel: list of extensions, description of the selected
one and a button to install, update or uninstall it.

The panel does not install anything itself. Installers listen to
``action_requested`` and report back through ``install_progress``:

    panel.action_requested.connect(installer.start)
    installer.progress.connect(panel.install_progress)  # chained signals
"""

from PyQt5.QtCore import QModelIndex, Qt
from PyQt5.QtWidgets import (
    QAction,
    QHBoxLayout,
    QHeaderView,
    QSplitter,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from extstore.config import ACTION_COLORS
from extstore.domain import Extension, LocalExtensionList
from extstore.ui.widgets.description_view import DescriptionView
from extstore.ui.widgets.extension_item import STATUS_NOT_INSTALLED, STATUS_UPDATE, ExtensionItem
from extstore.ui.widgets.progress_button import BUTTON_STATES, ProgressButton
from extstore.utils.events import Signal
from extstore.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def action_for_status(status: str) -> str:
    """Return the button action offered for an item status."""
    if status == STATUS_NOT_INSTALLED:
        return "install"
    if status == STATUS_UPDATE:
        return "update"
    return "uninstall"


class StorePanel(QWidget):
    """Store list, description pane and action button.

    Signals:
        extension_selected(Extension): the current list item changed
        action_requested(str, Extension): the button was clicked, with the
            action name ("install", "update" or "uninstall")
        install_progress(float): progress of the running action, forwarded
            to the button
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)

        self.extension_selected = Signal(Extension, name="StorePanel.extension_selected")
        self.action_requested = Signal(str, Extension, name="StorePanel.action_requested")
        self.install_progress = Signal(float, name="StorePanel.install_progress")

        self._current: Extension | None = None
        # extension whose action is running, the button belongs to it until done
        self._running: Extension | None = None

        self._setup_ui()

        self.extension_selected.connect(self, StorePanel.show_extension)
        self.install_progress.connect(self.button.set_progress)
        self.install_progress.connect(self, StorePanel._on_install_progress)

    def _setup_ui(self) -> None:
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal, self)

        self.tree = QTreeWidget(splitter)
        self.tree.setColumnCount(2)
        self.tree.setHeaderHidden(True)
        self.tree.setRootIsDecorated(False)
        self.tree.header().setStretchLastSection(False)
        self.tree.header().setSectionResizeMode(0, QHeaderView.Stretch)
        self.tree.header().setSectionResizeMode(1, QHeaderView.ResizeToContents)
        self.tree.currentItemChanged.connect(self._on_current_item_changed)

        right = QWidget(splitter)
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(0, 0, 0, 0)

        self.description = DescriptionView(right)
        right_layout.addWidget(self.description, 1)

        self.action = QAction(self)
        self.action.triggered.connect(self._on_action_triggered)

        self.button = ProgressButton(ACTION_COLORS["install"], right)
        self.button.setDefaultAction(self.action)
        self.button.set_enabled(False)

        button_row = QHBoxLayout()
        button_row.addStretch(1)
        button_row.addWidget(self.button)
        right_layout.addLayout(button_row)

        main_layout.addWidget(splitter)

    # ----- list -----

    def populate(self, extensions: list[Extension], local_list: LocalExtensionList) -> None:
        """Rebuild the list from ``extensions``."""
        self.tree.clear()
        for extension in extensions:
            ExtensionItem(extension, local_list, self.tree)
        self.tree.setCurrentIndex(QModelIndex())
        self._current = None

        self.description.set_description("")
        self.button.set_enabled(False)
        logger.info("[StorePanel] Listed %d extension(s)", len(extensions))

    def items(self) -> list[ExtensionItem]:
        return [self.tree.topLevelItem(i) for i in range(self.tree.topLevelItemCount())]

    def find_item(self, extension_id: str) -> ExtensionItem | None:
        for item in self.items():
            if item.extension_id() == extension_id:
                return item
        return None

    def current_extension(self) -> Extension | None:
        return self._current

    def select_extension(self, extension_id: str) -> None:
        item = self.find_item(extension_id)
        if item is None:
            logger.warning("[StorePanel] No list item for extension %s", extension_id)
            return
        self.tree.setCurrentItem(item)

    def _on_current_item_changed(
        self, current: QTreeWidgetItem | None, _previous: QTreeWidgetItem | None
    ) -> None:
        if not isinstance(current, ExtensionItem):
            return
        self.extension_selected.emit(current.extension)

    # ----- selected extension -----

    def show_extension(self, extension: Extension) -> None:
        """Describe ``extension`` and offer the matching action on the button.

        While an action runs the button keeps showing it, only the
        description follows the selection.
        """
        self._current = extension
        self.description.set_description(extension.description)
        if self._running is not None:
            return

        item = self.find_item(extension.id)
        status = item.status if item is not None else STATUS_NOT_INSTALLED
        state = BUTTON_STATES[action_for_status(status)]

        self.action.setToolTip(state.state)
        self.action.setText(state.default_text)
        self.button.accent_color = ACTION_COLORS[state.state]
        self.button.set_enabled(True)

    def is_running(self) -> bool:
        """Return True while a requested action has not reported completion."""
        return self._running is not None

    def _on_action_triggered(self, _checked: bool = False) -> None:
        state = self.button.get_state()
        if self._current is None or state is None:
            return
        logger.info("[StorePanel] %s requested for %s", state.state, self._current.id)
        self._running = self._current
        self.action_requested.emit(state.state, self._current)

    def _on_install_progress(self, progress: float) -> None:
        if self._running is None or 0 <= progress < 1:
            return
        finished, self._running = self._running, None
        logger.info("[StorePanel] %s finished (%s)", finished.id, progress)

        # the selection moved while the action ran
        if self._current is None:
            self.button.set_enabled(False)
        elif self._current is not finished:
            self.show_extension(self._current)
