"""
pyqt_imports.py

Author: Michael Economou
Date: 2026-10-19

Centralized PyQt5 imports to reduce import clutter in UI and model modules.
Groups related Qt classes together.
"""

# Core Qt classes
from PyQt5.QtCore import (
    QAbstractListModel,
    QModelIndex,
    Qt,
    pyqtSignal,
)

# GUI classes
from PyQt5.QtGui import (
    QCloseEvent,
    QKeySequence,
)

# Widgets
from PyQt5.QtWidgets import (
    QAbstractItemView,
    QAction,
    QApplication,
    QListView,
    QMainWindow,
    QToolBar,
    QWidget,
)

__all__ = [
    # Core
    "QAbstractListModel",
    "QModelIndex",
    "Qt",
    "pyqtSignal",
    # GUI
    "QCloseEvent",
    "QKeySequence",
    # Widgets
    "QAbstractItemView",
    "QAction",
    "QApplication",
    "QListView",
    "QMainWindow",
    "QToolBar",
    "QWidget",
]
