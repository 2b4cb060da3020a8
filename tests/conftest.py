"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-19

Global pytest configuration and fixtures for the listsync test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Add project root to sys.path so 'listsync' can be imported without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Headless Qt unless the caller asked for a real display platform
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402

from listsync.models.observable_list import ObservableList  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI tests on CI."""
    _ = session
    _ = config

    if "CI" in os.environ or "GITHUB_ACTIONS" in os.environ:
        skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication for all Qt tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    yield app


@pytest.fixture(autouse=True)
def qt_cleanup(request):
    """Close top-level widgets left behind by GUI tests."""
    yield

    if "qapp" not in request.fixturenames and "qtbot" not in request.fixturenames:
        return

    from PyQt5.QtCore import QCoreApplication
    from PyQt5.QtWidgets import QApplication

    QCoreApplication.processEvents()
    for widget in QApplication.topLevelWidgets():
        try:
            widget.close()
            widget.deleteLater()
        except RuntimeError:
            pass
    QCoreApplication.processEvents()


@pytest.fixture
def small_list():
    """ObservableList holding [0, 1, 2]."""
    return ObservableList([0, 1, 2])


@pytest.fixture
def recorder():
    """Callable that records every value it is called with."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args[0] if len(args) == 1 else args)

    return Recorder()
