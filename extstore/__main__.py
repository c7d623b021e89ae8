#!/usr/bin/env python3
"""
Module: __main__.py

Author: Michael Economou
Date: 2026-02-02

Opens the store panel with a few sample extensions:
    python -m extstore

Installs are simulated with a timer so the progress button can be tried
without a store backend.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path

from PyQt5.QtCore import QTimer
from PyQt5.QtWidgets import QApplication

from extstore.config import APP_NAME, APP_VERSION, WINDOW_TITLE
from extstore.domain import Extension, LocalExtension, LocalExtensionList
from extstore.ui.store_panel import StorePanel
from extstore.utils.events import Signal
from extstore.utils.logging.logger_setup import ConfigureLogger

logger = logging.getLogger()


def get_user_config_dir(app_name: str = APP_NAME) -> str:
    """Get user configuration directory based on OS."""
    if os.name == "nt":
        base_dir = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base_dir = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return os.path.join(base_dir, app_name)


def sample_extensions(install_dir: str) -> tuple[list[Extension], LocalExtensionList]:
    extensions = [
        Extension(
            id="cfperez/batch-export",
            name="Batch Export",
            version="1.4.0",
            description="<h3>Batch Export</h3><p>Export every scene of a folder in one go.</p>",
            files=["batch_export.js"],
        ),
        Extension(
            id="mathieuc/palette-tools",
            name="Palette Tools",
            version="2.1.0",
            description="<h3>Palette Tools</h3><p>Sort, merge and clean up palettes.</p>",
            files=["palette_tools.js"],
        ),
        Extension(
            id="tomasr/camera-rig",
            name="Camera Rig",
            version="0.9.2",
            description="<h3>Camera Rig</h3><p>Parent a camera to a peg and animate it.</p>",
            files=["camera_rig.js", "icons/rig.png"],
        ),
    ]
    Path(install_dir, "palette_tools.js").touch()
    local_list = LocalExtensionList(
        [
            LocalExtension("mathieuc/palette-tools", "Palette Tools", "2.0.3", install_dir, ["palette_tools.js"]),
            LocalExtension("tomasr/camera-rig", "Camera Rig", "0.9.2", install_dir, ["camera_rig.js"]),
        ],
        data={"newExtensions": ["cfperez/batch-export"]},
    )
    return extensions, local_list


class SimulatedInstaller:
    """Reports fake progress for an action, 10% every 200ms."""

    def __init__(self):
        self.progress = Signal(float, name="SimulatedInstaller.progress")
        self._value = 0.0
        self._timer = QTimer()
        self._timer.setInterval(200)
        self._timer.timeout.connect(self._step)

    def start(self, action: str, extension: Extension) -> None:
        logger.info("Simulating %s of %s", action, extension.id)
        self._value = 0.0
        self.progress.emit(self._value)
        self._timer.start()

    def _step(self) -> None:
        self._value = min(1.0, self._value + 0.1)
        if self._value >= 1.0:
            self._timer.stop()
        self.progress.emit(self._value)


def main() -> int:
    ConfigureLogger(log_name=APP_NAME, log_dir=os.path.join(get_user_config_dir(), "logs"))
    logger.info("%s %s starting", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)

    panel = StorePanel()
    panel.setWindowTitle(WINDOW_TITLE)
    panel.resize(720, 420)

    installer = SimulatedInstaller()
    panel.action_requested.connect(installer.start)
    installer.progress.connect(panel.install_progress)

    # the sample install folder lives as long as the window
    with tempfile.TemporaryDirectory(prefix=f"{APP_NAME}_") as install_dir:
        extensions, local_list = sample_extensions(install_dir)
        panel.populate(extensions, local_list)
        panel.show()

        return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
