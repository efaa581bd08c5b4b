"""Public API for listing input devices.

This module provides backend-agnostic functions for discovering and listing
keyboards and mice. Applications should use these functions instead of
directly accessing backend implementation details.
"""

from __future__ import annotations

from typing import Any


def list_input_devices() -> list[dict[str, Any]]:
    """List all keyboards and mice in the system.

    Physical devices are listed first, followed by virtual (uinput) devices.

    Returns:
        list[dict[str, Any]]: One dict per device with keys:
            - 'name': Device name (str)
            - 'path': Device path (str)
            - 'kind': 'keyboard', 'mouse' or 'keyboard+mouse' (str)
            - 'is_virtual': Whether device is virtual/uinput (bool)

    Raises:
        PermissionError: If access to /dev/input/ is denied
        OSError: If device listing fails for other reasons
    """
    import evdev

    try:
        device_paths = evdev.list_devices()
    except PermissionError as e:
        raise PermissionError(
            'Permission denied accessing /dev/input/. '
            'Add user to "input" group:\n'
            '  sudo usermod -a -G input $USER\n'
            'Then log out and back in for changes to take effect.'
        ) from e

    physical = []
    virtual = []

    for path in device_paths:
        try:
            device = evdev.InputDevice(path)
        except (OSError, PermissionError):
            continue

        kind = device_kind(device.capabilities())
        if kind is None:
            device.close()
            continue

        is_virtual = is_virtual_device(device.name, path)
        device_info = {
            'name': device.name,
            'path': device.path,
            'kind': kind,
            'is_virtual': is_virtual,
        }
        device.close()

        if is_virtual:
            virtual.append(device_info)
        else:
            physical.append(device_info)

    return physical + virtual


def is_virtual_device(name: str, path: str) -> bool:
    """Return True for uinput devices created by other programs."""
    return 'uinput' in name.lower() or 'uinput' in str(path).lower()


def device_kind(capabilities: dict[int, list[int]]) -> str | None:
    """Classify a device from its evdev capabilities.

    Args:
        capabilities: Result of InputDevice.capabilities()

    Returns:
        'keyboard', 'mouse', 'keyboard+mouse' or None for anything else
    """
    from evdev import ecodes

    keys = capabilities.get(ecodes.EV_KEY, [])
    is_keyboard = any(code in keys for code in (
        ecodes.KEY_LEFTCTRL, ecodes.KEY_RIGHTCTRL, ecodes.KEY_LEFTALT, ecodes.KEY_A,
    ))
    is_mouse = ecodes.BTN_LEFT in keys

    if is_keyboard and is_mouse:
        return 'keyboard+mouse'
    if is_keyboard:
        return 'keyboard'
    if is_mouse:
        return 'mouse'
    return None
