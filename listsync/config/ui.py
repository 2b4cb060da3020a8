"""Module: listsync.config.ui

Author: Michael Economou
Date: 2026-10-19

UI configuration: window geometry, titles and keyboard shortcuts.
"""

WINDOW_TITLE = "Items"
WINDOW_MIN_WIDTH = 320
WINDOW_MIN_HEIGHT = 480
WINDOW_DEFAULT_SIZE = (360, 560)

# Action shortcuts (QKeySequence strings)
SHORTCUT_ADD_ITEM = "Ctrl+N"
SHORTCUT_DELETE_ITEM = "Delete"
