"""Base input backend abstraction using Protocol.

This module defines the InputBackend protocol that all backends must implement.
Using Protocol instead of ABC allows for structural subtyping (duck typing + type checking)
without requiring explicit inheritance.
"""

from collections.abc import Callable
from typing import Protocol

from shortcut_recorder.models import RawInputEvent


class InputBackend(Protocol):
    """Protocol for keyboard/mouse event sources.

    Backends must implement these methods to be usable by the recording
    session. No explicit inheritance required - structural subtyping.

    Example:
        class ScriptedBackend:  # No inheritance needed!
            def start(self, on_event) -> None: ...
            def stop(self) -> None: ...
            def get_backend_name(self) -> str: ...

        backend: InputBackend = ScriptedBackend()
    """

    def start(self, on_event: Callable[[RawInputEvent], None]) -> None:
        """Start listening for input events (blocking call).

        This method should block until stop() is called from another thread,
        a callback or a signal handler. Events must be delivered one at a
        time, in chronological order, from the thread that called start().

        Args:
            on_event: Callback receiving every key and mouse button
                press/release as a RawInputEvent.
        """
        ...

    def stop(self) -> None:
        """Stop listening for input events.

        This method should cause start() to unblock and return.
        It should clean up any resources (file descriptors, threads, etc).
        """
        ...

    def get_backend_name(self) -> str:
        """Return the name of this backend for logging and debugging."""
        ...


class BackendNotAvailableError(Exception):
    """Raised when a backend cannot be initialized.

    This can happen for various reasons:
    - Required library not installed (e.g., evdev)
    - No suitable input devices found
    - Permission denied (for /dev/input/ access)

    The error message should provide actionable guidance for the user.
    """
    pass
