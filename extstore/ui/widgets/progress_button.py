"""Module: progress_button.py

Author: Michael Economou
Date: 2026-02-02

A tool button that also shows the progress of the operation it started.

The button's default action decides what it does: its tooltip is one of
"install", "uninstall" or "update". While an operation runs, the button
is disabled and its background turns into a progress bar in the accent color.

Usage:
    button = ProgressButton(ACTION_COLORS["install"])
    button.setDefaultAction(install_action)  # tooltip "install"
    button.set_progress(0.42)  # "Installing 42%"
    button.set_progress(1)     # "Install", enabled again
    button.set_progress(-1)    # reset after a failure
"""

from dataclasses import dataclass

from PyQt5.QtWidgets import QToolButton, QWidget

from extstore.config import (
    COLORS,
    PROGRESS_BUTTON_HEIGHT,
    PROGRESS_BUTTON_WIDTH,
    STYLESHEETS,
)
from extstore.utils.events import Signal
from extstore.utils.logging.logger_factory import get_cached_logger
from extstore.utils.ui.dpi_helper import dpi_scale
from extstore.utils.ui.stylesheet_utils import (
    render_accent_style,
    render_completed_style,
    render_progress_style,
)

logger = get_cached_logger(__name__)


@dataclass(frozen=True)
class ButtonState:
    """What the button does and the texts it shows."""

    state: str
    default_text: str
    progress_text: str


BUTTON_STATES = {
    "install": ButtonState("install", "Install", "Installing"),
    "uninstall": ButtonState("uninstall", "Uninstall", "Uninstalling"),
    "update": ButtonState("update", "Update", "Updating"),
}


class ProgressButton(QToolButton):
    """Tool button with an accent color and a progress display.

    Signals:
        progress_changed(float): emitted after every ``set_progress`` call
    """

    def __init__(self, color: str, parent: QWidget | None = None):
        super().__init__(parent)
        self.setFixedSize(dpi_scale(PROGRESS_BUTTON_WIDTH), dpi_scale(PROGRESS_BUTTON_HEIGHT))

        self.progress_changed = Signal(float, name="ProgressButton.progress_changed")
        self.accent_color = color

    # ----- accent color -----

    @property
    def accent_color(self) -> str:
        return self._accent_color

    @accent_color.setter
    def accent_color(self, color: str) -> None:
        self._accent_color = color
        self.setStyleSheet(render_accent_style(STYLESHEETS["progress_button"], color))

    # ----- state -----

    def get_state(self) -> ButtonState | None:
        """Return the state matching the default action's tooltip, if any."""
        action = self.defaultAction()
        if action is None:
            return None
        return BUTTON_STATES.get(action.toolTip().strip().lower())

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the button.

        With a default action the action carries the state, since the button
        copies it from the action whenever the action changes.
        """
        action = self.defaultAction()
        if action is not None:
            action.setEnabled(enabled)
        self.setEnabled(enabled)

    def set_text(self, text: str) -> None:
        """Set the text of the default action, or of the button without one."""
        action = self.defaultAction()
        if action is not None:
            action.setText(text)
        else:
            self.setText(text)

    def set_progress(self, progress: float) -> None:
        """Show ``progress`` (0..1).

        Negative values reset the button, values of 1 or more mark the
        operation as completed.
        """
        state = self.get_state()
        if state is None:
            logger.warning(
                "[ProgressButton] No known action state (tooltip of the default action), "
                "text left unchanged"
            )

        if progress < 0:
            # re-apply the idle stylesheet
            self.accent_color = self.accent_color
            self.set_enabled(True)
            if state is not None:
                self.set_text(state.default_text)
        elif progress < 1:
            self.set_enabled(False)
            self.setStyleSheet(render_progress_style(progress, self.accent_color, COLORS["12DP"]))
            if state is not None:
                self.set_text(f"{state.progress_text} {round(progress * 100)}%")
        else:
            self.setStyleSheet(render_completed_style(self.accent_color))
            self.set_enabled(True)
            if state is not None:
                self.set_text(state.default_text)

        self.progress_changed.emit(progress)
