"""Backend factory.

All applications use the evdev backend, which reads keyboards and mice on
both X11 and Wayland.
"""

from typing import Any

from common.logging_utils import get_logger

from .base import BackendNotAvailableError, InputBackend


logger = get_logger('common.backend')


def create_backend(
    device_name: str | None = None,
    **kwargs: Any
) -> InputBackend:
    """Create the evdev input backend.

    Args:
        device_name: Only read devices whose name contains this string
            (case-insensitive). None reads every keyboard and mouse.
        **kwargs: Additional arguments passed to EvdevBackend constructor
                 (e.g., device_path).

    Returns:
        InputBackend: Initialized EvdevBackend instance.

    Raises:
        BackendNotAvailableError: If the evdev library is not installed.
            Missing devices and permission problems surface when the
            backend is started.

    Examples:
        backend = create_backend()
        backend = create_backend(device_name='Logitech')
        backend = create_backend(device_path='/dev/input/event3')
    """
    try:
        from .evdev_backend import EvdevBackend
        if device_name:
            kwargs['device_name'] = device_name
        backend = EvdevBackend(**kwargs)
        logger.info(f'Created backend: {backend.get_backend_name()}')
        return backend
    except BackendNotAvailableError as e:
        error_msg = (
            f'Evdev backend is not available: {e}\n\n'
            f'Troubleshooting:\n'
            f'1. Install evdev library: pip install evdev\n'
            f'2. Add user to input group:\n'
            f'   sudo usermod -a -G input $USER\n'
            f'   Then log out and back in.'
        )
        raise BackendNotAvailableError(error_msg) from e
