"""Timing heuristics: double key presses and long mouse presses.

Both work purely on event timestamps (milliseconds); nothing here reads a clock.
"""

DEFAULT_DOUBLE_PRESS_THRESHOLD_MS = 500
DEFAULT_LONG_PRESS_THRESHOLD_MS = 500


def register_key_press(
    history: dict[int, list[int]],
    code: int,
    timestamp: int,
    threshold_ms: int = DEFAULT_DOUBLE_PRESS_THRESHOLD_MS,
) -> bool:
    """Record a key press and report whether it completes a double-press.

    Press times older than ``threshold_ms`` relative to ``timestamp`` are
    dropped from the key's history before the new press is appended. When two
    or more presses remain, the history for the key is cleared so that a third
    quick press starts over instead of counting as another double-press.

    Args:
        history: Key code -> recent press timestamps, updated in place
        code: Key code that was pressed
        timestamp: Press time in milliseconds
        threshold_ms: Maximum gap between the two presses

    Returns:
        bool: True if this press is the second half of a double-press
    """
    presses = [t for t in history.get(code, []) if timestamp - t <= threshold_ms]
    presses.append(timestamp)

    if len(presses) >= 2:
        history[code] = []
        return True

    history[code] = presses
    return False


def is_long_press(
    pressed_at: int | None,
    released_at: int,
    threshold_ms: int = DEFAULT_LONG_PRESS_THRESHOLD_MS,
) -> bool:
    """Return True if a button held from ``pressed_at`` to ``released_at`` is a long press.

    A release without a recorded press is never a long press.
    """
    if pressed_at is None:
        return False
    return released_at - pressed_at >= threshold_ms
