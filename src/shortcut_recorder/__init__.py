"""Shortcut Recorder - recognize custom keyboard/mouse shortcuts from raw input.

Feed press/release events into a ShortcutRecorder and receive a live preview
after every event, plus a finished descriptor for every accepted shortcut.
"""

from .config_loader import ConfigLoader
from .models import DescriptorStatus
from .models import EventKind
from .models import KeyElement
from .models import LabelStyle
from .models import MouseElement
from .models import RawInputEvent
from .models import RecorderConfig
from .models import RecorderState
from .models import ShortcutDescriptor
from .models import ShortcutKind
from .recorder import ShortcutRecorder
from .recorder import replay_events

__all__ = [
    'ConfigLoader',
    'DescriptorStatus',
    'EventKind',
    'KeyElement',
    'LabelStyle',
    'MouseElement',
    'RawInputEvent',
    'RecorderConfig',
    'RecorderState',
    'ShortcutDescriptor',
    'ShortcutKind',
    'ShortcutRecorder',
    'replay_events',
]
