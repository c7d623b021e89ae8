"""Module: extstore.config

Author: Michael Economou
Date: 2026-02-02

Configuration package for the extension store.

This package organizes configuration into logical modules:
- app: Application info, logging
- ui: Colors, icons, stylesheets, widget sizes

All settings are re-exported from this module:
    from extstore.config import APP_NAME, COLORS
"""

from extstore.config.app import *  # noqa: F401, F403
from extstore.config.ui import *  # noqa: F401, F403
