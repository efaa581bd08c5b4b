"""Label rendering for recorded sequences."""

from collections.abc import Sequence

from .key_names import get_button_name
from .key_names import get_key_name
from .models import KeyElement
from .models import LabelStyle
from .models import SequenceElement
from .validator import is_double_press_sequence


def format_element(element: SequenceElement, style: LabelStyle | None = None) -> str:
    """Render one element.

    Keys render as their name ("A", "Ctrl"), mouse presses as button name plus
    press type ("Left (long)", "Button4 (short)").
    """
    style = style or LabelStyle()
    if isinstance(element, KeyElement):
        return get_key_name(element.code)

    press_type = style.long_press_suffix if element.is_long_press else style.short_press_suffix
    return f'{get_button_name(element.button)}{press_type}'


def format_label(sequence: Sequence[SequenceElement], style: LabelStyle | None = None) -> str:
    """Render a whole sequence as a display label.

    Args:
        sequence: Recorded elements, in press order
        style: Label strings (defaults to LabelStyle())

    Returns:
        str: e.g. "Ctrl → A", "Double-F", "" for an empty sequence

    Examples:
        >>> format_label([KeyElement(code=29, ctrl_held=True), KeyElement(code=30, ctrl_held=True)])
        'Ctrl → A'
    """
    style = style or LabelStyle()
    if is_double_press_sequence(sequence):
        return f'{style.double_press_prefix}{get_key_name(sequence[-1].code)}'
    return style.separator.join(format_element(element, style) for element in sequence)
