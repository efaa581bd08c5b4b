"""Input backend abstraction for X11 and Wayland support.

This module provides backend abstraction for keyboard and mouse event
handling, so the recorder never touches device details directly.
"""

from .base import BackendNotAvailableError, InputBackend
from .detector import create_backend
from .device_listing import list_input_devices

__all__ = [
    'InputBackend',
    'BackendNotAvailableError',
    'create_backend',
    'list_input_devices',
]
