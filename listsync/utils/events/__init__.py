"""Module: __init__.py.

Author: Michael Economou
Date: 2026-10-19

Infrastructure - Event System.

Pure Python event/signal implementation for decoupling observers from state changes.
Models publish through Signal; the UI layer subscribes without the model
depending on Qt.
"""

from listsync.utils.events.observable import Observable, Signal, SignalInstance, Subscription

__all__ = ["Observable", "Signal", "SignalInstance", "Subscription"]
