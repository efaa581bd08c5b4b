"""Sequence validation for recorded shortcuts.

A finished attempt is accepted when its sequence matches one of the shortcut
shapes below. Rules are checked in priority order and the first match wins.
"""

from collections.abc import Callable, Sequence

from .key_names import LEFT_BUTTON
from .key_names import RIGHT_BUTTON
from .models import KeyElement
from .models import MouseElement
from .models import SequenceElement
from .models import ShortcutKind


def is_double_press_sequence(sequence: Sequence[SequenceElement]) -> bool:
    """A single key that was pressed twice in quick succession."""
    if len(sequence) != 1 or not isinstance(sequence[0], KeyElement):
        return False
    return sequence[0].is_double_press


def is_modifier_key_combination(sequence: Sequence[SequenceElement]) -> bool:
    """Two or more elements, starting with a key pressed while Ctrl/Alt was held."""
    if len(sequence) < 2 or not isinstance(sequence[0], KeyElement):
        return False
    return sequence[0].has_modifier


def is_mouse_button_shortcut(sequence: Sequence[SequenceElement]) -> bool:
    """A single mouse press; plain left and right clicks only count when held long."""
    if len(sequence) != 1 or not isinstance(sequence[0], MouseElement):
        return False
    element = sequence[0]
    if element.button in (LEFT_BUTTON, RIGHT_BUTTON) and not element.is_long_press:
        return False
    return True


def is_modifier_mouse_combination(sequence: Sequence[SequenceElement]) -> bool:
    """Exactly two elements: something held with Ctrl/Alt, then a mouse press."""
    if len(sequence) != 2 or not isinstance(sequence[1], MouseElement):
        return False
    return sequence[0].has_modifier


def is_two_key_sequence(sequence: Sequence[SequenceElement]) -> bool:
    """Exactly two different keys, the first without Ctrl/Alt."""
    if len(sequence) != 2:
        return False
    first, second = sequence
    if not isinstance(first, KeyElement) or not isinstance(second, KeyElement):
        return False
    if first.has_modifier:
        return False
    return first.code != second.code


RULES: tuple[tuple[ShortcutKind, Callable[[Sequence[SequenceElement]], bool]], ...] = (
    (ShortcutKind.DOUBLE_PRESS, is_double_press_sequence),
    (ShortcutKind.MODIFIER_KEY, is_modifier_key_combination),
    (ShortcutKind.MOUSE_BUTTON, is_mouse_button_shortcut),
    (ShortcutKind.MODIFIER_MOUSE, is_modifier_mouse_combination),
    (ShortcutKind.TWO_KEY, is_two_key_sequence),
)


def validate_sequence(sequence: Sequence[SequenceElement]) -> ShortcutKind | None:
    """Classify a finished sequence.

    Args:
        sequence: Elements recorded during one attempt

    Returns:
        ShortcutKind of the first matching rule, or None if the sequence
        is not an accepted shortcut (empty sequences included)
    """
    if not sequence:
        return None

    for kind, rule in RULES:
        if rule(sequence):
            return kind
    return None
