from __future__ import annotations

from typing import Set

from ..key_mapping import ALT_CODES, CTRL_CODES
from .types import KeyRef


class KeyState:
    """Tracks per-device pressed keys and the resulting modifier state.

    Modifiers are shared across devices: Ctrl held on one keyboard counts as
    held for a click on a mouse.
    """

    def __init__(self) -> None:
        self.pressed_keys: Set[KeyRef] = set()

    def register_press(self, ref: KeyRef) -> None:
        self.pressed_keys.add(ref)

    def discard_press(self, ref: KeyRef) -> None:
        self.pressed_keys.discard(ref)

    def is_pressed(self, ref: KeyRef) -> bool:
        return ref in self.pressed_keys

    def ctrl_held(self) -> bool:
        return any(code in CTRL_CODES for _, code in self.pressed_keys)

    def alt_held(self) -> bool:
        return any(code in ALT_CODES for _, code in self.pressed_keys)
