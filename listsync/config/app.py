"""Module: listsync.config.app

Author: Michael Economou
Date: 2026-10-19

Application-level configuration: app info, initial data, logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "listsync"
APP_VERSION = "1.0"
APP_AUTHOR = "Michael Economou"

# =====================================
# DATA
# =====================================

# Contents of a freshly created ObservableList
DEFAULT_ITEMS = tuple(range(10))

# Inclusive bounds for values picked by the "Add" action
RANDOM_VALUE_MIN = 0
RANDOM_VALUE_MAX = 100

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 1_000_000  # 1MB per file
LOG_FILE_BACKUP_COUNT = 3

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_LEVEL = "DEBUG"
LOG_DEBUG_FILE_MAX_BYTES = 2_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 2

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
