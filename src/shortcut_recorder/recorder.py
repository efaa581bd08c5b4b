"""Shortcut recording and recognition logic.

This module implements the core recorder: it consumes a serialized stream of
raw press/release events, keeps track of what is held down, and reports a live
preview after every event plus a finished shortcut whenever an attempt ends in
an accepted shape.
"""

import traceback
from collections.abc import Callable, Iterable

from common.logging_utils import get_logger

from .detectors import is_long_press
from .detectors import register_key_press
from .formatter import format_label
from .key_names import get_button_name
from .key_names import get_key_name
from .models import DescriptorStatus
from .models import EventKind
from .models import KeyElement
from .models import MouseElement
from .models import RawInputEvent
from .models import RecorderConfig
from .models import RecorderState
from .models import ShortcutDescriptor
from .models import ShortcutKind
from .validator import validate_sequence


class ShortcutRecorder:
    """Record keyboard/mouse input and recognize shortcuts.

    Attempt Semantics (important):
    - An attempt starts with the first press after a reset
    - It ends when every key and mouse button has been released
    - The finished sequence is validated once; accepted sequences are reported
      with status FINISHED, rejected ones are dropped silently
    - Either way the attempt state is reset, but the double-press history is
      kept so a double-press can span two attempts
    - There is no timeout: a press that is never released keeps the attempt
      open until reset() is called

    Args:
        on_update: Callback receiving a ShortcutDescriptor after every event
            (UPDATED) and once per accepted attempt (FINISHED)
        config: Thresholds and label style (defaults to RecorderConfig())
        verbose: Whether to output per-event debug traces
    """

    def __init__(
        self,
        on_update: Callable[[ShortcutDescriptor], None],
        config: RecorderConfig | None = None,
        verbose: bool = False,
    ) -> None:
        self.on_update = on_update
        self.config = config or RecorderConfig()
        self.verbose = verbose
        self._state = RecorderState()
        self.logger = get_logger('shortcut_recorder.recorder')

    @property
    def state(self) -> RecorderState:
        """Current attempt state. Read-only; use reset() to clear it."""
        return self._state

    def handle_event(self, event: RawInputEvent) -> None:
        """Process one raw input event and emit a preview.

        Args:
            event: Raw event from the input source. Unknown kinds are ignored
                but still produce a preview.
        """
        if event.kind == EventKind.KEY_DOWN:
            self._on_key_down(event)
        elif event.kind == EventKind.KEY_UP:
            self._on_key_up(event)
        elif event.kind == EventKind.MOUSE_DOWN:
            self._on_mouse_down(event)
        elif event.kind == EventKind.MOUSE_UP:
            self._on_mouse_up(event)
        elif self.verbose:
            self.logger.debug('Ignoring event of unknown kind %r', event.kind)

        self._notify(self._describe(DescriptorStatus.UPDATED))

    def reset(self) -> None:
        """Abandon the current attempt.

        Held keys, held buttons and the recorded sequence are cleared. The
        double-press history is not.
        """
        self._state.reset()

    def _on_key_down(self, event: RawInputEvent) -> None:
        """Handle key press event."""
        # Ignore auto-repeat (key already pressed)
        if event.code in self._state.active_keys:
            if self.verbose:
                self.logger.debug('%s already pressed (autorepeat), ignoring', get_key_name(event.code))
            return

        self._state.active_keys.add(event.code)
        element = KeyElement(
            code=event.code,
            ctrl_held=event.ctrl_held,
            alt_held=event.alt_held,
            timestamp=event.timestamp,
        )
        self._state.sequence.append(element)

        if register_key_press(
            self._state.press_history,
            event.code,
            event.timestamp,
            self.config.double_press_threshold_ms,
        ):
            element.is_double_press = True

        if self.verbose:
            self.logger.debug(
                '%d: %s pressed (ctrl=%s, alt=%s%s)',
                event.timestamp,
                get_key_name(event.code),
                event.ctrl_held,
                event.alt_held,
                ', double press' if element.is_double_press else '',
            )

    def _on_key_up(self, event: RawInputEvent) -> None:
        """Handle key release event."""
        self._state.active_keys.discard(event.code)

        if self.verbose:
            self.logger.debug('%d: %s released', event.timestamp, get_key_name(event.code))

        if self._state.all_released:
            self._finalize()

    def _on_mouse_down(self, event: RawInputEvent) -> None:
        """Handle mouse button press event."""
        self._state.mouse_down_at[event.code] = event.timestamp
        self._state.sequence.append(MouseElement(
            button=event.code,
            ctrl_held=event.ctrl_held,
            alt_held=event.alt_held,
            timestamp=event.timestamp,
        ))

        if self.verbose:
            self.logger.debug('%d: %s button pressed', event.timestamp, get_button_name(event.code))

    def _on_mouse_up(self, event: RawInputEvent) -> None:
        """Handle mouse button release event."""
        pressed_at = self._state.mouse_down_at.pop(event.code, None)
        long_press = is_long_press(pressed_at, event.timestamp, self.config.long_press_threshold_ms)

        # Most recent press of this button whose type is still undecided
        for element in reversed(self._state.sequence):
            if isinstance(element, MouseElement) and element.button == event.code and not element.released:
                element.is_long_press = long_press
                element.released = True
                break

        if self.verbose:
            self.logger.debug(
                '%d: %s button released (%s press)',
                event.timestamp,
                get_button_name(event.code),
                'long' if long_press else 'short',
            )

        if self._state.all_released:
            self._finalize()

    def _finalize(self) -> None:
        """Validate the finished attempt, report it if accepted, then reset."""
        kind = validate_sequence(self._state.sequence)

        if kind is not None:
            descriptor = self._describe(DescriptorStatus.FINISHED, kind)
            self.logger.info('Shortcut recorded: %s (%s)', descriptor.label, kind.value)
            self._notify(descriptor)
        elif self.verbose and self._state.sequence:
            self.logger.debug('Sequence rejected: %s', format_label(self._state.sequence, self.config.labels))

        self._state.reset()

    def _describe(self, status: DescriptorStatus, kind: ShortcutKind | None = None) -> ShortcutDescriptor:
        return ShortcutDescriptor.snapshot(
            label=format_label(self._state.sequence, self.config.labels),
            sequence=self._state.sequence,
            status=status,
            kind=kind,
        )

    def _notify(self, descriptor: ShortcutDescriptor) -> None:
        """Safely call the update callback, logging any errors."""
        try:
            self.on_update(descriptor)
        except Exception as e:
            self.logger.error(f'Error in on_update callback: {e}')
            self.logger.debug(traceback.format_exc())


def replay_events(
    events: Iterable[RawInputEvent],
    config: RecorderConfig | None = None,
    verbose: bool = False,
) -> list[ShortcutDescriptor]:
    """Run a finite list of events through a fresh recorder.

    Args:
        events: Raw events in chronological order
        config: Recorder configuration
        verbose: Whether to output per-event debug traces

    Returns:
        list[ShortcutDescriptor]: Every descriptor emitted, previews included
    """
    descriptors: list[ShortcutDescriptor] = []
    recorder = ShortcutRecorder(on_update=descriptors.append, config=config, verbose=verbose)
    for event in events:
        recorder.handle_event(event)
    return descriptors
