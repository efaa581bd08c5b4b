"""Evdev backend package.

Exports EvdevBackend while allowing internal helpers/modules to evolve.
"""

from __future__ import annotations

import atexit
import queue
import threading
from contextlib import suppress
from typing import Any, Callable

from common.logging_utils import get_logger
from shortcut_recorder.models import RawInputEvent

from ..base import BackendNotAvailableError
from .device_manager import DeviceManager
from .event_router import EventRouter
from .key_state import KeyState
from .parser import parse_event
from .processor import EventProcessor


class EvdevBackend:
    """Keyboard and mouse backend using evdev (Wayland/X11 compatible).

    Devices are only read, never grabbed: input keeps reaching the desktop
    while a shortcut is being recorded.
    """

    def __init__(
        self,
        device_path: str | None = None,
        device_name: str | None = None
    ) -> None:
        self.logger = get_logger('common.backend.evdev')
        self.device_path = device_path
        self.device_name = device_name
        self.devices: list[Any] = []
        self._stop_event = threading.Event()
        self._device_threads: list[threading.Thread] = []
        self._event_queue: queue.Queue[tuple[Any, Any]] = queue.Queue(maxsize=1000)
        self.key_state = KeyState()

        try:
            import evdev  # noqa: F401
        except ImportError as e:
            raise BackendNotAvailableError(
                'evdev library is not installed. '
                'Install it with: pip install evdev'
            ) from e

        atexit.register(self._cleanup_devices)
        self.logger.debug('EvdevBackend initialized')

    def _resolve_devices(self, dm: DeviceManager) -> list[Any]:
        import evdev
        if self.device_name:
            devices_found = dm.discover_by_name(self.device_name)
            if not devices_found:
                raise BackendNotAvailableError(
                    f'No input device found matching name "{self.device_name}"'
                )
            return devices_found
        if self.device_path:
            try:
                device = evdev.InputDevice(self.device_path)
            except (OSError, PermissionError) as e:
                raise BackendNotAvailableError(
                    f'Cannot access device {self.device_path}: {e}'
                ) from e
            self.logger.info(f'Using specified device path: {self.device_path}')
            return [device]
        devices_found = dm.discover_auto()
        if not devices_found:
            raise BackendNotAvailableError('No keyboard or mouse devices found')
        return devices_found

    def _cleanup_devices(self) -> None:
        self._stop_event.set()
        for thread in self._device_threads:
            if thread.is_alive() and thread is not threading.current_thread():
                with suppress(Exception):
                    thread.join(timeout=1.0)
        self._device_threads.clear()
        for device in self.devices:
            with suppress(Exception):
                device.close()
        self.devices.clear()

    # -------------------- Public API --------------------
    def start(self, on_event: Callable[[RawInputEvent], None]) -> None:
        dm = DeviceManager(self.logger)
        self.devices = self._resolve_devices(dm)

        self.logger.info(f'Using {len(self.devices)} input device(s)')
        for device in self.devices:
            self.logger.info(f'  - {device.name} ({device.path})')

        self._stop_event.clear()

        try:
            self.logger.info(f'Starting event read threads for {len(self.devices)} device(s)...')
            self._device_threads = dm.start_reader_threads(
                self.devices, self._event_queue.put_nowait, self._stop_event
            )

            processor = EventProcessor(logger=self.logger, key_state=self.key_state)
            router = EventRouter(
                logger=self.logger,
                parse_event=parse_event,
                handle_event=lambda evt: processor.process(evt, on_event),
            )
            router.run(self._event_queue.get, self._stop_event)
        except Exception as e:
            self.logger.error(f'Error in main event loop: {e}')
            raise BackendNotAvailableError(
                f'Error processing input events: {e}'
            ) from e
        finally:
            self._cleanup_devices()

    def stop(self) -> None:
        self.logger.info('Stopping evdev input listener')
        self._stop_event.set()

    def get_backend_name(self) -> str:
        return 'evdev (Wayland/X11)'


__all__ = ['EvdevBackend']
