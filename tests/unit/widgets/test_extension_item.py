"""Unit tests for ExtensionItem.

Tests labels, status column and stored extension id.
"""

import pytest
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QTreeWidget

from extstore.config import EXTENSION_ITEM_TYPE
from extstore.domain import Extension, LocalExtension, LocalExtensionList
from extstore.ui.widgets.extension_item import (
    STATUS_ERROR,
    STATUS_INSTALLED,
    STATUS_NOT_INSTALLED,
    STATUS_UPDATE,
    ExtensionItem,
    resolve_status,
)

pytestmark = pytest.mark.gui


@pytest.fixture
def extensions_by_id(store_extensions):
    return {extension.id: extension for extension in store_extensions}


class TestExtensionItemLabel:
    """Test the name column."""

    def test_plain_name(self, qapp, extensions_by_id, local_list):
        """Test that an installed extension shows its name."""
        item = ExtensionItem(extensions_by_id["mathieuc/palette-tools"], local_list)

        assert item.text(0) == "Palette Tools"

    def test_new_marker(self, qapp, extensions_by_id, local_list):
        """Test that new extensions get the new marker."""
        item = ExtensionItem(extensions_by_id["cfperez/batch-export"], local_list)

        assert item.text(0) == "Batch Export ★new!"

    def test_extension_id_stored(self, qapp, extensions_by_id, local_list):
        """Test that the extension id is stored in the user role."""
        item = ExtensionItem(extensions_by_id["tomasr/camera-rig"], local_list)

        assert item.data(0, Qt.UserRole) == "tomasr/camera-rig"
        assert item.extension_id() == "tomasr/camera-rig"

    def test_item_type(self, qapp, extensions_by_id, local_list):
        """Test the custom item type."""
        item = ExtensionItem(extensions_by_id["tomasr/camera-rig"], local_list)

        assert item.type() == EXTENSION_ITEM_TYPE


class TestExtensionItemStatus:
    """Test the status column."""

    def test_not_installed(self, qapp, extensions_by_id, local_list):
        """Test an extension that is not installed."""
        item = ExtensionItem(extensions_by_id["cfperez/batch-export"], local_list)

        assert item.status == STATUS_NOT_INSTALLED
        assert item.toolTip(1) == ""

    def test_installed(self, qapp, extensions_by_id, local_list):
        """Test a correctly installed extension."""
        item = ExtensionItem(extensions_by_id["mathieuc/palette-tools"], local_list)

        assert item.status == STATUS_INSTALLED
        assert item.toolTip(1) == "Extension is installed correctly."

    def test_update_available(self, qapp, extensions_by_id, local_list):
        """Test that a newer store version wins over missing files."""
        item = ExtensionItem(extensions_by_id["tomasr/camera-rig"], local_list)

        assert item.status == STATUS_UPDATE
        assert item.toolTip(1) == "Update available:\ncurrently installed version : v0.9.2"

    def test_missing_files(self, qapp, tmp_path):
        """Test an up to date extension with missing files."""
        extension = Extension("a/b", "B", "1.0.0", files=["b.js"])
        local_list = LocalExtensionList([LocalExtension("a/b", "B", "1.0.0", str(tmp_path), ["b.js"])])

        item = ExtensionItem(extension, local_list)

        assert item.status == STATUS_ERROR
        assert item.toolTip(1) == "Some files from this extension are missing."

    def test_resolve_status_without_widget(self, extensions_by_id, local_list):
        """Test status resolution on its own."""
        status, tooltip = resolve_status(extensions_by_id["cfperez/batch-export"], local_list)

        assert status == STATUS_NOT_INSTALLED
        assert tooltip == ""


class TestExtensionItemIcons:
    """Test icon setup."""

    def test_no_icon_url(self, qapp, extensions_by_id, local_list):
        """Test that no remote icon is requested without an url."""
        item = ExtensionItem(extensions_by_id["mathieuc/palette-tools"], local_list)

        assert item.extension_icon is None


class TestExtensionItemParent:
    """Test adding items to a tree."""

    def test_added_to_tree(self, qtbot, store_extensions, local_list):
        """Test that passing a tree widget adds the item to it."""
        tree = QTreeWidget()
        qtbot.addWidget(tree)
        tree.setColumnCount(2)

        for extension in store_extensions:
            ExtensionItem(extension, local_list, tree)

        assert tree.topLevelItemCount() == 3
        first = tree.topLevelItem(0)
        assert isinstance(first, ExtensionItem)
        assert first.extension is store_extensions[0]
