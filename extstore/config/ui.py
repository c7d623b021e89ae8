"""Module: extstore.config.ui

Author: Michael Economou
Date: 2026-02-02

UI settings: colors, icons, stylesheets and widget sizes of the store panel.
"""

import os

# =====================================
# COLORS
# =====================================

# Material dark surfaces, named after their elevation
COLORS = {
    "12DP": "#2c2c2c",
    "24DP": "#383838",
    "RED": "#cf6679",
    "GREEN": "#30d158",
    "ORANGE": "#ff9f0a",
}

# Accent used per button action
ACTION_COLORS = {
    "install": COLORS["GREEN"],
    "update": COLORS["ORANGE"],
    "uninstall": COLORS["RED"],
}

# =====================================
# ICONS
# =====================================

ICONS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "resources", "icons")

# Logical icon name -> file name inside ICONS_DIR
ICONS = {
    "installed": "installed.svg",
    "update": "update.svg",
    "error": "error.svg",
    "not_installed": "not_installed.svg",
    "default_extension": "default_extension.svg",
}

# Remote icons larger than this are rejected
WEB_ICON_MAX_BYTES = 512 * 1024

# =====================================
# WIDGET SETTINGS
# =====================================

DESCRIPTION_FONT_FAMILY = "Arial"
DESCRIPTION_FONT_SIZE = 12
DESCRIPTION_PLACEHOLDER = "<i>No description available.</i>"

PROGRESS_BUTTON_WIDTH = 130
PROGRESS_BUTTON_HEIGHT = 30

# Gap between the two gradient stops of the progress stylesheet
PROGRESS_STOP_GAP = 0.001

NEW_EXTENSION_SUFFIX = " ★new!"

EXTENSION_ITEM_TYPE = 1024

# =====================================
# STYLESHEETS
# =====================================

# @ACCENT is replaced with the button accent color
STYLESHEETS = {
    "progress_button": (
        "QToolButton {"
        "  border: 1px solid @ACCENT;"
        "  border-radius: 3px;"
        "  background-color: transparent;"
        "  color: @ACCENT;"
        "}"
        "QToolButton:hover {"
        "  background-color: @ACCENT;"
        "  color: white;"
        "}"
        "QToolButton:disabled {"
        "  border-color: " + COLORS["24DP"] + ";"
        "  color: " + COLORS["24DP"] + ";"
        "}"
    ),
}
