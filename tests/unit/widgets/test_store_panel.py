"""Unit tests for StorePanel.

Tests list population and the signal wiring between list, description,
button and installers.
"""

import pytest

from extstore.config import ACTION_COLORS
from extstore.ui.store_panel import StorePanel, action_for_status
from extstore.ui.widgets.extension_item import (
    STATUS_ERROR,
    STATUS_INSTALLED,
    STATUS_NOT_INSTALLED,
    STATUS_UPDATE,
)
from extstore.utils.events import Signal

pytestmark = pytest.mark.gui


@pytest.fixture
def panel(qtbot, store_extensions, local_list):
    widget = StorePanel()
    qtbot.addWidget(widget)
    widget.populate(store_extensions, local_list)
    return widget


class TestActionForStatus:
    """Test the action offered per item status."""

    @pytest.mark.parametrize(
        ("status", "action"),
        [
            (STATUS_NOT_INSTALLED, "install"),
            (STATUS_UPDATE, "update"),
            (STATUS_INSTALLED, "uninstall"),
            (STATUS_ERROR, "uninstall"),
        ],
    )
    def test_action(self, status, action):
        assert action_for_status(status) == action


class TestStorePanelPopulate:
    """Test filling the list."""

    def test_items_created(self, panel):
        """Test one item per extension, in order."""
        items = panel.items()

        assert [item.extension_id() for item in items] == [
            "cfperez/batch-export",
            "mathieuc/palette-tools",
            "tomasr/camera-rig",
        ]

    def test_button_disabled_without_selection(self, panel):
        """Test that nothing can be installed before a selection."""
        assert panel.button.isEnabled() is False
        assert panel.current_extension() is None

    def test_repopulate_replaces_items(self, panel, store_extensions, local_list):
        """Test that populate clears the previous items."""
        panel.populate(store_extensions[:1], local_list)

        assert len(panel.items()) == 1

    def test_find_unknown_item(self, panel):
        """Test that unknown ids give no item."""
        assert panel.find_item("nobody/nothing") is None


class TestStorePanelSelection:
    """Test selecting extensions."""

    def test_selection_emits_extension_selected(self, panel, store_extensions):
        """Test that selecting an item emits the extension."""
        selected = []
        panel.extension_selected.connect(selected.append)

        panel.select_extension("mathieuc/palette-tools")

        assert selected == [store_extensions[1]]
        assert panel.current_extension() is store_extensions[1]

    def test_selection_updates_description(self, panel):
        """Test that the description pane follows the selection."""
        panel.select_extension("mathieuc/palette-tools")

        assert panel.description.toPlainText() == "Sort and merge palettes."

    @pytest.mark.parametrize(
        ("extension_id", "action", "text"),
        [
            ("cfperez/batch-export", "install", "Install"),
            ("mathieuc/palette-tools", "uninstall", "Uninstall"),
            ("tomasr/camera-rig", "update", "Update"),
        ],
    )
    def test_selection_sets_button_action(self, panel, extension_id, action, text):
        """Test the button action, text and color for each status."""
        panel.select_extension(extension_id)

        assert panel.action.toolTip() == action
        assert panel.action.text() == text
        assert panel.button.accent_color == ACTION_COLORS[action]
        assert panel.button.isEnabled() is True

    def test_blocked_selection_signal(self, panel):
        """Test that blocking extension_selected leaves the panel untouched."""
        panel.extension_selected.blocked = True

        panel.select_extension("mathieuc/palette-tools")

        assert panel.current_extension() is None


class TestStorePanelActions:
    """Test the button and progress wiring."""

    def test_action_requested(self, panel, store_extensions):
        """Test that triggering the action emits the request."""
        requested = []
        panel.action_requested.connect(lambda action, extension: requested.append((action, extension)))
        panel.select_extension("cfperez/batch-export")

        panel.action.trigger()

        assert requested == [("install", store_extensions[0])]

    def test_no_request_without_selection(self, panel):
        """Test that the action does nothing before a selection."""
        requested = []
        panel.action_requested.connect(lambda *args: requested.append(args))

        panel.action.trigger()

        assert requested == []

    def test_install_progress_drives_button(self, panel):
        """Test that install_progress is forwarded to the button."""
        panel.select_extension("tomasr/camera-rig")

        panel.install_progress.emit(0.5)
        assert panel.button.isEnabled() is False
        assert panel.action.text() == "Updating 50%"

        panel.install_progress.emit(1.0)
        assert panel.button.isEnabled() is True
        assert panel.action.text() == "Update"

    def test_chained_installer_signal(self, panel):
        """Test that an installer signal chained to the panel reaches the button."""
        installer_progress = Signal(float, name="installer.progress")
        installer_progress.connect(panel.install_progress)
        seen = []
        panel.button.progress_changed.connect(seen.append)
        panel.select_extension("cfperez/batch-export")

        installer_progress.emit(0.25)

        assert seen == [0.25]
        assert panel.action.text() == "Installing 25%"

    def test_selection_during_action_keeps_button(self, panel):
        """Test that selecting another item mid-action leaves the button alone."""
        panel.select_extension("cfperez/batch-export")
        panel.action.trigger()
        panel.install_progress.emit(0.5)

        panel.select_extension("mathieuc/palette-tools")
        panel.install_progress.emit(0.6)

        assert panel.is_running() is True
        assert panel.description.toPlainText() == "Sort and merge palettes."
        assert panel.action.toolTip() == "install"
        assert panel.action.text() == "Installing 60%"
        assert panel.button.isEnabled() is False

    def test_finished_action_shows_current_selection(self, panel):
        """Test that the button follows the selection once the action is done."""
        panel.select_extension("cfperez/batch-export")
        panel.action.trigger()
        panel.install_progress.emit(0.5)
        panel.select_extension("mathieuc/palette-tools")

        panel.install_progress.emit(1.0)

        assert panel.is_running() is False
        assert panel.action.toolTip() == "uninstall"
        assert panel.action.text() == "Uninstall"
        assert panel.button.isEnabled() is True

    def test_failed_action_releases_button(self, panel):
        """Test that a negative progress ends the running action."""
        panel.select_extension("tomasr/camera-rig")
        panel.action.trigger()
        panel.install_progress.emit(0.2)

        panel.install_progress.emit(-1)

        assert panel.is_running() is False
        assert panel.action.text() == "Update"
        assert panel.button.isEnabled() is True
