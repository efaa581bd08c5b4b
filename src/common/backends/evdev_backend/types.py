from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

DeviceId = int
KeyRef = Tuple[DeviceId, int]


@dataclass(slots=True)
class ParsedEvent:
    device_id: DeviceId
    key_ref: KeyRef
    code: int
    value: int  # 0 release, 1 press, 2 repeat
    timestamp: int  # milliseconds
    is_button: bool


class KeyStateProtocol(Protocol):
    def register_press(self, ref: KeyRef) -> None: ...
    def discard_press(self, ref: KeyRef) -> None: ...
    def is_pressed(self, ref: KeyRef) -> bool: ...
    def ctrl_held(self) -> bool: ...
    def alt_held(self) -> bool: ...
