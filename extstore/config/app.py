"""Module: extstore.config.app

Author: Michael Economou
Date: 2026-02-02

Application-level configuration: app info and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "extstore"
APP_VERSION = "0.4.0"

# Window
WINDOW_TITLE = "Extension Store"

# =====================================
# LOGGING CONFIGURATION
# =====================================

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "ERROR"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 2_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
