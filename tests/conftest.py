"""
Module: conftest.py

Author: Michael Economou
Date: 2026-02-02

Global pytest configuration and fixtures for the extstore test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Headless Qt: must be set before QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to sys.path so 'extstore' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from extstore.domain import Extension, LocalExtension, LocalExtensionList


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if not is_ci:
        return

    skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
    for item in items:
        if "gui" in item.keywords:
            item.add_marker(skip_gui)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for all GUI tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    yield app


@pytest.fixture
def install_dir(tmp_path):
    """Install directory holding the files of the installed sample extensions."""
    (tmp_path / "palette_tools.js").write_text("// palette tools\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def store_extensions():
    """Extensions as published on the store."""
    return [
        Extension(
            id="cfperez/batch-export",
            name="Batch Export",
            version="1.4.0",
            description="<p>Export every scene of a folder.</p>",
            files=["batch_export.js"],
        ),
        Extension(
            id="mathieuc/palette-tools",
            name="Palette Tools",
            version="2.0.3",
            description="<p>Sort and merge palettes.</p>",
            files=["palette_tools.js"],
        ),
        Extension(
            id="tomasr/camera-rig",
            name="Camera Rig",
            version="1.0.0",
            description="<p>Camera rigging helpers.</p>",
            files=["camera_rig.js"],
        ),
    ]


@pytest.fixture
def local_list(install_dir):
    """Palette Tools installed correctly, Camera Rig outdated and missing files."""
    return LocalExtensionList(
        [
            LocalExtension(
                "mathieuc/palette-tools", "Palette Tools", "2.0.3", str(install_dir), ["palette_tools.js"]
            ),
            LocalExtension("tomasr/camera-rig", "Camera Rig", "0.9.2", str(install_dir), ["camera_rig.js"]),
        ],
        data={"newExtensions": ["cfperez/batch-export"]},
    )
