"""Data models for the shortcut recognition engine.

Raw input events come in, sequence elements are recorded while an attempt is
in progress, and shortcut descriptors go out to the caller.
"""

from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from enum import Enum
from enum import IntEnum
from pathlib import Path
from typing import Any


class EventKind(IntEnum):
    """Raw event kinds.

    Values match the libuiohook event type numbers, so a hook feed can be
    passed through unchanged.
    """
    KEY_DOWN = 4
    KEY_UP = 5
    MOUSE_DOWN = 7
    MOUSE_UP = 8


class DescriptorStatus(str, Enum):
    """Whether a descriptor is a live preview or a committed shortcut."""
    UPDATED = 'updated'
    FINISHED = 'finished'


class ShortcutKind(str, Enum):
    """Accepted shortcut shapes, in validation priority order."""
    DOUBLE_PRESS = 'double_press'
    MODIFIER_KEY = 'modifier_key'
    MOUSE_BUTTON = 'mouse_button'
    MODIFIER_MOUSE = 'modifier_mouse'
    TWO_KEY = 'two_key'


@dataclass(frozen=True, slots=True)
class RawInputEvent:
    """A single press/release event delivered by the input source.

    Attributes:
        kind: Event kind. Plain integers outside EventKind are allowed and
            ignored by the recorder.
        code: Key code for keyboard events, button id for mouse events
        ctrl_held: Whether Ctrl was held when the event fired
        alt_held: Whether Alt was held when the event fired
        timestamp: Event time in milliseconds, monotonically increasing
    """
    kind: EventKind | int
    code: int
    ctrl_held: bool = False
    alt_held: bool = False
    timestamp: int = 0

    @property
    def has_modifier(self) -> bool:
        return self.ctrl_held or self.alt_held


@dataclass(slots=True)
class KeyElement:
    """A recorded key press.

    Attributes:
        code: Key code
        ctrl_held: Ctrl state at press time
        alt_held: Alt state at press time
        timestamp: Press time in milliseconds
        is_double_press: Set when this press completed a double-press
    """
    code: int
    ctrl_held: bool = False
    alt_held: bool = False
    timestamp: int = 0
    is_double_press: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.ctrl_held or self.alt_held

    def to_dict(self) -> dict[str, Any]:
        return {
            'type': 'key',
            'code': self.code,
            'ctrl': self.ctrl_held,
            'alt': self.alt_held,
            'double_press': self.is_double_press,
        }


@dataclass(slots=True)
class MouseElement:
    """A recorded mouse button press.

    Attributes:
        button: Mouse button id (1 left, 2 right, 3 middle, ...)
        ctrl_held: Ctrl state at press time
        alt_held: Alt state at press time
        timestamp: Press time in milliseconds
        is_long_press: Decided when the button is released
        released: True once the press type has been decided
    """
    button: int
    ctrl_held: bool = False
    alt_held: bool = False
    timestamp: int = 0
    is_long_press: bool = False
    released: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.ctrl_held or self.alt_held

    def to_dict(self) -> dict[str, Any]:
        return {
            'type': 'mouse',
            'button': self.button,
            'ctrl': self.ctrl_held,
            'alt': self.alt_held,
            'long_press': self.is_long_press,
        }


SequenceElement = KeyElement | MouseElement


@dataclass
class RecorderState:
    """Mutable state of the recorder.

    Attributes:
        active_keys: Key codes currently held down
        mouse_down_at: Button id -> press timestamp for held buttons
        sequence: Elements recorded during the current attempt, in arrival order
        press_history: Key code -> recent press timestamps for double-press
            detection. Survives reset().
    """
    active_keys: set[int] = field(default_factory=set)
    mouse_down_at: dict[int, int] = field(default_factory=dict)
    sequence: list[SequenceElement] = field(default_factory=list)
    press_history: dict[int, list[int]] = field(default_factory=dict)

    @property
    def all_released(self) -> bool:
        """True when no key and no mouse button is held."""
        return not self.active_keys and not self.mouse_down_at

    def reset(self) -> None:
        """End the current attempt. Press history is kept."""
        self.active_keys.clear()
        self.mouse_down_at.clear()
        self.sequence = []


@dataclass(frozen=True)
class ShortcutDescriptor:
    """Engine output: a live preview or a finished shortcut.

    Attributes:
        label: Human-readable label, e.g. "Ctrl → A" or "Double-F"
        sequence: Snapshot of the recorded elements
        status: UPDATED for previews, FINISHED for accepted shortcuts
        kind: Shape that accepted the sequence (FINISHED only)
    """
    label: str
    sequence: tuple[SequenceElement, ...]
    status: DescriptorStatus
    kind: ShortcutKind | None = None

    @property
    def is_finished(self) -> bool:
        return self.status is DescriptorStatus.FINISHED

    @classmethod
    def snapshot(
        cls,
        label: str,
        sequence: list[SequenceElement],
        status: DescriptorStatus,
        kind: ShortcutKind | None = None,
    ) -> 'ShortcutDescriptor':
        """Build a descriptor holding copies of the live sequence elements."""
        return cls(
            label=label,
            sequence=tuple(replace(element) for element in sequence),
            status=status,
            kind=kind,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'label': self.label,
            'status': self.status.value,
            'kind': self.kind.value if self.kind else None,
            'sequence': [element.to_dict() for element in self.sequence],
        }


@dataclass
class LabelStyle:
    """Static strings used when rendering labels.

    Attributes:
        separator: Joins element labels
        double_press_prefix: Prefix for double-press labels
        long_press_suffix: Appended to a long mouse press
        short_press_suffix: Appended to a short mouse press
    """
    separator: str = ' → '
    double_press_prefix: str = 'Double-'
    long_press_suffix: str = ' (long)'
    short_press_suffix: str = ' (short)'

    def __post_init__(self) -> None:
        """Validate the label strings."""
        for name in ('separator', 'double_press_prefix', 'long_press_suffix', 'short_press_suffix'):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"'{name}' must be a string, got {type(value).__name__}")  # noqa: TRY003


@dataclass
class RecorderConfig:
    """Recorder and application configuration.

    Attributes:
        long_press_threshold_ms: Minimum hold time for a long mouse press
        double_press_threshold_ms: Maximum gap between two presses of a double-press
        labels: Label rendering strings
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (None for console only)
        verbose_logging: Enable per-event debug traces
    """
    long_press_threshold_ms: int = 500
    double_press_threshold_ms: int = 500
    labels: LabelStyle = field(default_factory=LabelStyle)
    log_level: str = 'INFO'
    log_file: Path | None = None
    verbose_logging: bool = False

    def __post_init__(self) -> None:
        """Validate the configuration."""
        for name in ('long_press_threshold_ms', 'double_press_threshold_ms'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"'{name}' must be an integer")  # noqa: TRY003
            if value <= 0:
                raise ValueError(f'{name} must be positive, got {value}')  # noqa: TRY003

        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR'):
            raise ValueError(f'Invalid log_level: {self.log_level}')  # noqa: TRY003
