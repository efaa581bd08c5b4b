"""Loading of recorded event files for replay.

An event file is TOML with one [[events]] table per raw event:

    [[events]]
    kind = "key_down"   # key_down, key_up, mouse_down, mouse_up or an integer
    code = 30
    ctrl = false
    alt = false
    time = 0
"""

import tomllib
from pathlib import Path
from typing import Any

from shortcut_recorder import EventKind
from shortcut_recorder import RawInputEvent

KIND_NAMES: dict[str, EventKind] = {
    'key_down': EventKind.KEY_DOWN,
    'key_up': EventKind.KEY_UP,
    'mouse_down': EventKind.MOUSE_DOWN,
    'mouse_up': EventKind.MOUSE_UP,
}


def load_events(path: Path) -> list[RawInputEvent]:
    """Load raw events from a TOML event file.

    Args:
        path: Path to the event file

    Returns:
        list[RawInputEvent]: Events in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If an event is invalid
        tomllib.TOMLDecodeError: If TOML syntax is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f'Event file not found: {path}')  # noqa: TRY003

    with path.open('rb') as f:
        data = tomllib.load(f)

    return parse_events(data)


def parse_events(data: dict[str, Any]) -> list[RawInputEvent]:
    """Parse TOML data into raw events.

    Raises:
        ValueError: If the data has no events or an event is invalid
    """
    events_data = data.get('events', [])
    if not isinstance(events_data, list) or not events_data:
        raise ValueError('Event file must have at least one [[events]] section')  # noqa: TRY003

    events = []
    previous_time: int | None = None
    for idx, event_data in enumerate(events_data, 1):
        try:
            event = _parse_event(event_data)
        except (TypeError, ValueError) as e:
            raise ValueError(f'Error in event #{idx}: {e}') from e  # noqa: TRY003

        if previous_time is not None and event.timestamp < previous_time:
            raise ValueError(  # noqa: TRY003
                f'Error in event #{idx}: time {event.timestamp} is earlier than the previous event'
            )
        previous_time = event.timestamp
        events.append(event)

    return events


def _parse_event(data: Any) -> RawInputEvent:
    if not isinstance(data, dict):
        raise TypeError('event must be a table')  # noqa: TRY003

    kind = _parse_kind(data.get('kind'))

    code = data.get('code')
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError("'code' must be an integer")  # noqa: TRY003

    ctrl = data.get('ctrl', False)
    alt = data.get('alt', False)
    if not isinstance(ctrl, bool) or not isinstance(alt, bool):
        raise TypeError("'ctrl' and 'alt' must be booleans")  # noqa: TRY003

    timestamp = data.get('time', 0)
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise TypeError("'time' must be an integer (milliseconds)")  # noqa: TRY003

    return RawInputEvent(kind=kind, code=code, ctrl_held=ctrl, alt_held=alt, timestamp=timestamp)


def _parse_kind(value: Any) -> EventKind | int:
    """Resolve an event kind name; integers pass through so unknown kinds can be replayed."""
    if isinstance(value, bool):
        raise TypeError("'kind' must be a string or an integer")  # noqa: TRY003
    if isinstance(value, int):
        try:
            return EventKind(value)
        except ValueError:
            return value
    if isinstance(value, str):
        try:
            return KIND_NAMES[value.lower()]
        except KeyError:
            names = ', '.join(KIND_NAMES)
            raise ValueError(f"Unknown kind '{value}' (expected one of: {names})") from None  # noqa: TRY003
    raise ValueError("Event must have a 'kind' field")  # noqa: TRY003
