from __future__ import annotations

from typing import Any

from ..key_mapping import EV_KEY, is_button_code
from .types import ParsedEvent


def parse_event(device: Any, event: Any) -> ParsedEvent | None:
    """Parse raw evdev event into ParsedEvent.

    Returns None for events that are not key or button events.
    """
    if event.type != EV_KEY:
        return None
    device_id = device.fileno() if hasattr(device, 'fileno') else id(device)
    timestamp = int(event.sec) * 1000 + int(event.usec) // 1000
    return ParsedEvent(
        device_id=device_id,
        key_ref=(device_id, event.code),
        code=event.code,
        value=event.value,
        timestamp=timestamp,
        is_button=is_button_code(event.code),
    )
