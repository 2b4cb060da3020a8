"""Module: listsync.config

Author: Michael Economou
Date: 2026-10-19

Configuration package for the listsync application.

This package organizes configuration into logical modules:
- app: Application info, initial data, logging
- ui: Window geometry, titles, action shortcuts

All settings are re-exported from this module:
    from listsync.config import APP_NAME, DEFAULT_ITEMS
"""

from listsync.config.app import *  # noqa: F401, F403
from listsync.config.ui import *  # noqa: F401, F403
