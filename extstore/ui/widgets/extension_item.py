"""Module: extension_item.py

Author: Michael Economou
Date: 2026-02-02

The QTreeWidgetItem representing a single extension in the store list.

Columns:
- 0: extension name (with a "new" marker) and the extension icon
- 1: status icon with a tooltip: installed, update available, files missing
     or not installed
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QTreeWidget, QTreeWidgetItem

from extstore.config import EXTENSION_ITEM_TYPE, NEW_EXTENSION_SUFFIX
from extstore.domain import Extension, LocalExtensionList
from extstore.ui.widgets.web_icon import WebIcon
from extstore.utils.logging.logger_factory import get_cached_logger
from extstore.utils.ui.icons_loader import get_store_icon

logger = get_cached_logger(__name__)

NAME_COLUMN = 0
STATUS_COLUMN = 1

STATUS_INSTALLED = "installed"
STATUS_UPDATE = "update"
STATUS_ERROR = "error"
STATUS_NOT_INSTALLED = "not_installed"

TOOLTIP_INSTALLED = "Extension is installed correctly."
TOOLTIP_UPDATE = "Update available:\ncurrently installed version : v{version}"
TOOLTIP_ERROR = "Some files from this extension are missing."


def resolve_status(extension: Extension, local_list: LocalExtensionList) -> tuple[str, str]:
    """Return the (status, tooltip) pair shown in the status column."""
    if not local_list.is_installed(extension):
        return STATUS_NOT_INSTALLED, ""

    local_extension = local_list.extensions[extension.id]
    if local_extension.current_version_is_older(extension.version):
        return STATUS_UPDATE, TOOLTIP_UPDATE.format(version=local_extension.version)
    if not local_list.check_files(local_extension):
        return STATUS_ERROR, TOOLTIP_ERROR
    return STATUS_INSTALLED, TOOLTIP_INSTALLED


class ExtensionItem(QTreeWidgetItem):
    """Store list item for ``extension``.

    Args:
        extension: the extension represented by this item
        local_list: the extensions installed on this machine
        parent: the tree widget receiving the item

    """

    def __init__(
        self,
        extension: Extension,
        local_list: LocalExtensionList,
        parent: QTreeWidget | None = None,
    ):
        label = extension.name
        if extension.id in local_list.get_data("newExtensions", []):
            label += NEW_EXTENSION_SUFFIX

        if parent is not None:
            super().__init__(parent, [label, ""], EXTENSION_ITEM_TYPE)
        else:
            super().__init__([label, ""], EXTENSION_ITEM_TYPE)

        self.extension = extension
        self.status, tooltip = resolve_status(extension, local_list)
        self.setIcon(STATUS_COLUMN, get_store_icon(self.status))
        if tooltip:
            self.setToolTip(STATUS_COLUMN, tooltip)

        # local icon, kept when there is no remote one or it fails to load
        self.setIcon(NAME_COLUMN, get_store_icon("default_extension"))
        self.extension_icon: WebIcon | None = None
        if extension.icon_url:
            logger.debug(
                "[ExtensionItem] Adding icon to %s from url: %s",
                extension.name,
                extension.icon_url,
                extra={"dev_only": True},
            )
            self.extension_icon = WebIcon(extension.icon_url)
            self.extension_icon.set_to_item(self, NAME_COLUMN)

        self.setData(NAME_COLUMN, Qt.UserRole, extension.id)

    def extension_id(self) -> str:
        return self.data(NAME_COLUMN, Qt.UserRole)
