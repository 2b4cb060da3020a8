"""Module: observable.py.

Author: Michael Economou
Date: 2026-10-19

Observable - Pure Python Observer pattern implementation.

Provides Qt signal-like functionality without Qt dependency:
- Signal descriptor for defining events
- Observable base class for state owners
- Connect/disconnect/emit interface
- Subscription handles that release their registration on demand

Delivery is synchronous: emit() calls every active subscriber, in
registration order, before it returns.
"""

from __future__ import annotations

import inspect
import threading
import weakref
from collections.abc import Callable
from typing import Any

from listsync.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance", "Subscription"]


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class Subscription:
    """Handle for one registered callback on a SignalInstance.

    Bound methods are held through a weak reference, so a subscription never
    keeps its subscriber alive. Plain functions and lambdas are held strongly.
    The owner of the handle is responsible for calling release().

    Usage:
        subscription = obj.value_changed.subscribe(callback)
        ...
        subscription.release()  # safe to call more than once
    """

    def __init__(self, signal: SignalInstance, callback: Callable[..., Any]):
        """Initialize subscription.

        Args:
            signal: The signal instance this subscription is registered on
            callback: Function to call when the signal is emitted

        """
        self._signal = signal
        self._name = _callback_name(callback)
        self._active = True
        if inspect.ismethod(callback):
            self._ref: Callable[[], Callable[..., Any] | None] = weakref.WeakMethod(callback)
        else:
            self._ref = lambda: callback

    @property
    def active(self) -> bool:
        """True until released or until a weakly held subscriber is collected."""
        return self._active and self._ref() is not None

    @property
    def callback(self) -> Callable[..., Any] | None:
        """The subscribed callback, or None if it has been garbage collected."""
        return self._ref()

    def release(self) -> None:
        """Stop delivery to this subscription. Idempotent."""
        if not self._active:
            return
        self._active = False
        self._signal._remove(self)
        logger.debug(
            "Subscription released: %s -> %s",
            self._signal.name,
            self._name,
            extra={"dev_only": True},
        )

    unsubscribe = release

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "active" if self.active else "released"
        return f"<Subscription {self._signal.name} -> {self._name} ({state})>"


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class MyClass(Observable):
            value_changed = Signal(int)  # Signal with int argument
            done = Signal()  # Signal with no arguments

        obj = MyClass()
        obj.value_changed.connect(callback)
        obj.value_changed.emit(42)
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with expected argument types.

        Args:
            *arg_types: Type hints for signal arguments (for documentation only)

        """
        self.arg_types = arg_types
        self.name = ""  # Set by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when signal is assigned to class attribute."""
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        """Get signal instance for object."""
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance
        return instance


class SignalInstance:
    """Instance of a signal for a specific object."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        """Initialize signal instance.

        Args:
            name: Signal name (for debugging)
            arg_types: Expected argument types

        """
        self.name = name
        self.arg_types = arg_types
        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Callable[..., Any]) -> Subscription:
        """Register callback and return the handle that unregisters it.

        Every call creates a new subscription, so subscribing the same
        callback twice delivers each emission to it twice.

        Args:
            callback: Function to call when signal is emitted

        Returns:
            Subscription handle owned by the caller

        """
        subscription = Subscription(self, callback)
        with self._lock:
            self._subscriptions.append(subscription)
        logger.debug(
            "Signal subscribed: %s -> %s",
            self.name,
            _callback_name(callback),
            extra={"dev_only": True},
        )
        return subscription

    def connect(self, callback: Callable[..., Any]) -> Subscription:
        """Connect callback to signal, ignoring duplicate connections.

        Args:
            callback: Function to call when signal is emitted

        Returns:
            The subscription for callback (the existing one if already connected)

        """
        with self._lock:
            for subscription in self._subscriptions:
                if subscription.active and subscription.callback == callback:
                    return subscription
        return self.subscribe(callback)

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect callback from signal.

        Args:
            callback: Callback to remove. If None, removes all callbacks.

        """
        with self._lock:
            if callback is None:
                targets = list(self._subscriptions)
            else:
                targets = [s for s in self._subscriptions if s.callback == callback]

        for subscription in targets:
            subscription.release()

        if callback is None:
            logger.debug(
                "All callbacks disconnected from %s (count: %d)",
                self.name,
                len(targets),
                extra={"dev_only": True},
            )

    def subscriber_count(self) -> int:
        """Number of subscriptions that would receive the next emission."""
        with self._lock:
            return sum(1 for s in self._subscriptions if s.active)

    def emit(self, *args: Any) -> None:
        """Emit signal with arguments.

        Args:
            *args: Arguments to pass to connected callbacks

        """
        # Snapshot subscriptions under lock
        with self._lock:
            subscriptions = list(self._subscriptions)

        # Call outside lock; subscribers may release themselves while handling
        for subscription in subscriptions:
            if not subscription._active:
                continue
            callback = subscription.callback
            if callback is None:
                subscription.release()
                continue
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s", self.name, _callback_name(callback)
                )

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            self._subscriptions = [s for s in self._subscriptions if s is not subscription]


class Observable:
    """Base class for objects with observable signals.

    Provides Qt signal-like functionality without Qt dependency.
    Use Signal descriptor to define events:

        class Counter(Observable):
            value_changed = Signal(int)

            def increment(self):
                self._value += 1
                self.value_changed.emit(self._value)
    """

    def __init__(self) -> None:
        """Initialize observable."""
        super().__init__()
