from __future__ import annotations

import threading
from typing import Any, Callable, Iterable

from ..device_listing import device_kind, is_virtual_device
from ..key_mapping import EV_KEY


class DeviceManager:
    """Finds keyboards and mice and reads them on background threads.

    Devices are opened for reading only; nothing here grabs a device.
    """

    def __init__(self, logger: Any) -> None:
        self.logger = logger

    def list_devices(self) -> list[str]:
        import evdev
        return evdev.list_devices()

    def open_input_devices(self) -> list[Any]:
        """Open every readable device that is a keyboard, a mouse, or both."""
        import evdev
        opened = []
        for path in self.list_devices():
            try:
                dev = evdev.InputDevice(path)
            except (OSError, PermissionError) as e:
                self.logger.debug(f'Skipping {path}: {e}')
                continue
            kind = device_kind(dev.capabilities())
            if kind is None:
                dev.close()
                continue
            self.logger.debug(f'Found {kind}: {dev.name} ({path})')
            opened.append(dev)
        return opened

    def discover_auto(self) -> list[Any]:
        """All keyboards and mice, physical ones only when any exist."""
        opened = self.open_input_devices()
        physical = []
        for dev in opened:
            if is_virtual_device(dev.name, dev.path):
                continue
            physical.append(dev)
        if not physical:
            return opened
        for dev in opened:
            if dev not in physical:
                dev.close()
        return physical

    def discover_by_name(self, name: str) -> list[Any]:
        """Return input devices whose name contains ``name`` (case-insensitive)."""
        wanted = name.lower()
        matched = []
        for dev in self.open_input_devices():
            if wanted in dev.name.lower():
                matched.append(dev)
            else:
                dev.close()
        return matched

    def start_reader_threads(
        self,
        devices: Iterable[Any],
        queue_put: Callable[[tuple[Any, Any]], None],
        stop_event: threading.Event,
    ) -> list[threading.Thread]:
        """Start one daemon reader thread per device.

        queue_put: Accepts (device, event); raises queue.Full when the queue overflows.
        stop_event: Readers exit once it is set.
        """
        threads = []
        for dev in devices:
            thread = threading.Thread(
                target=self._reader_loop,
                args=(dev, queue_put, stop_event),
                daemon=True,
                name=f'evdev-read-{dev.name}',
            )
            thread.start()
            threads.append(thread)
        return threads

    def _reader_loop(self, device: Any, queue_put, stop_event: threading.Event) -> None:
        try:
            for event in device.read_loop():
                if stop_event.is_set():
                    break
                # Motion and sync events would crowd key events out of the queue
                if event.type != EV_KEY:
                    continue
                try:
                    queue_put((device, event))
                except Exception as e:  # queue.Full: drop the event, keep reading
                    self.logger.warning(f'Dropping event from {device.name}: {e}')
        except OSError as e:
            # Closing the device during shutdown ends read_loop() with EBADF
            if not stop_event.is_set():
                self.logger.error(f'Error reading from device {device.name}: {e}')
        except Exception as e:  # noqa: BLE001
            self.logger.error(f'Unexpected error in read loop for {device.name}: {e}')
