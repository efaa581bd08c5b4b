from __future__ import annotations

import traceback
from typing import Any, Callable

from shortcut_recorder.models import EventKind, RawInputEvent

from ..key_mapping import evdev_to_hook_keycode, evdev_to_mouse_button
from .types import KeyStateProtocol, ParsedEvent


class EventProcessor:
    """Turns parsed evdev events into RawInputEvents and hands them to the callback."""

    def __init__(self, logger: Any, key_state: KeyStateProtocol) -> None:
        self.logger = logger
        self.key_state = key_state

    def _safe_call(self, label: str, fn: Callable[[Any], None], arg: Any) -> None:
        """Safely call a callback, logging any errors."""
        try:
            fn(arg)
        except Exception as e:
            self.logger.error(f'Error in {label} callback: {e}')
            self.logger.debug(traceback.format_exc())

    def to_raw_event(self, evt: ParsedEvent) -> RawInputEvent | None:
        """Update key state for a parsed event and build the matching RawInputEvent.

        Returns None for events the recorder does not consume: button codes
        that are not mouse buttons (touchpads, joysticks) and button repeats.
        """
        if evt.is_button:
            button = evdev_to_mouse_button(evt.code)
            if button is None or evt.value == 2:
                return None
            kind = EventKind.MOUSE_DOWN if evt.value == 1 else EventKind.MOUSE_UP
            return RawInputEvent(
                kind=kind,
                code=button,
                ctrl_held=self.key_state.ctrl_held(),
                alt_held=self.key_state.alt_held(),
                timestamp=evt.timestamp,
            )

        if evt.value == 0:  # Release
            self.key_state.discard_press(evt.key_ref)
            kind = EventKind.KEY_UP
        else:  # Press or autorepeat; the recorder ignores repeats itself
            self.key_state.register_press(evt.key_ref)
            kind = EventKind.KEY_DOWN

        return RawInputEvent(
            kind=kind,
            code=evdev_to_hook_keycode(evt.code),
            ctrl_held=self.key_state.ctrl_held(),
            alt_held=self.key_state.alt_held(),
            timestamp=evt.timestamp,
        )

    def process(self, evt: ParsedEvent, on_event: Callable[[RawInputEvent], None]) -> None:
        """Process a parsed event, calling on_event for everything the recorder consumes."""
        raw = self.to_raw_event(evt)
        if raw is None:
            self.logger.debug(f'Skipping button event: code={evt.code}, value={evt.value}')
            return
        self._safe_call('on_event', on_event, raw)
