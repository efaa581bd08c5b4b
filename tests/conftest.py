"""
Shared test fixtures for shortcut-recorder.

- Puts src/ on the Python path
- Event factories for building raw input streams
- A recorder fixture that collects every emitted descriptor
- Resets the project loggers after each test (the CLI installs handlers)
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src/ to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from common.logging_utils import PROJECT_LOGGERS  # noqa: E402
from shortcut_recorder import EventKind  # noqa: E402
from shortcut_recorder import RawInputEvent  # noqa: E402
from shortcut_recorder import ShortcutRecorder  # noqa: E402

KEY_CTRL = 29
KEY_ALT = 56
KEY_A = 30
KEY_S = 31
KEY_F = 33
KEY_G = 34

BUTTON_LEFT = 1
BUTTON_RIGHT = 2
BUTTON_MIDDLE = 3


def key_down(code: int, time: int, ctrl: bool = False, alt: bool = False) -> RawInputEvent:
    return RawInputEvent(EventKind.KEY_DOWN, code, ctrl_held=ctrl, alt_held=alt, timestamp=time)


def key_up(code: int, time: int, ctrl: bool = False, alt: bool = False) -> RawInputEvent:
    return RawInputEvent(EventKind.KEY_UP, code, ctrl_held=ctrl, alt_held=alt, timestamp=time)


def mouse_down(button: int, time: int, ctrl: bool = False, alt: bool = False) -> RawInputEvent:
    return RawInputEvent(EventKind.MOUSE_DOWN, button, ctrl_held=ctrl, alt_held=alt, timestamp=time)


def mouse_up(button: int, time: int, ctrl: bool = False, alt: bool = False) -> RawInputEvent:
    return RawInputEvent(EventKind.MOUSE_UP, button, ctrl_held=ctrl, alt_held=alt, timestamp=time)


class RecordingHarness:
    """A recorder plus every descriptor it emitted."""

    def __init__(self, **kwargs) -> None:
        self.descriptors = []
        self.recorder = ShortcutRecorder(on_update=self.descriptors.append, **kwargs)

    def feed(self, *events: RawInputEvent) -> None:
        for event in events:
            self.recorder.handle_event(event)

    @property
    def finished(self):
        return [d for d in self.descriptors if d.is_finished]

    @property
    def finished_labels(self) -> list[str]:
        return [d.label for d in self.finished]


class FakeBackend:
    """InputBackend that replays a fixed list of events."""

    def __init__(self, events=()):
        self.events = list(events)
        self.stopped = False
        self.delivered = 0

    def start(self, on_event):
        for event in self.events:
            if self.stopped:
                break
            on_event(event)
            self.delivered += 1

    def stop(self):
        self.stopped = True

    def get_backend_name(self):
        return 'fake'


@pytest.fixture
def harness():
    """Factory for RecordingHarness.

    Usage:
        h = harness()
        h = harness(config=RecorderConfig(long_press_threshold_ms=300))
    """

    def _create(**kwargs) -> RecordingHarness:
        return RecordingHarness(**kwargs)

    return _create


@pytest.fixture(autouse=True)
def reset_project_loggers():
    """Remove handlers installed by configure_logging() during a test."""
    yield
    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
