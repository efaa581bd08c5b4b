"""Static names for key codes and mouse buttons.

Key codes are libuiohook virtual key codes (PC set 1 scan codes, with the
0x0E00 / 0xE000 prefixes for extended keys).
"""

KEY_NAMES: dict[int, str] = {
    1: 'Escape',
    # Digit row
    2: '1', 3: '2', 4: '3', 5: '4', 6: '5', 7: '6', 8: '7', 9: '8', 10: '9', 11: '0',
    12: 'Minus', 13: 'Equal', 14: 'Backspace', 15: 'Tab',

    # Letters and punctuation
    16: 'Q', 17: 'W', 18: 'E', 19: 'R', 20: 'T', 21: 'Y', 22: 'U', 23: 'I', 24: 'O', 25: 'P',
    26: 'BracketLeft', 27: 'BracketRight', 28: 'Enter', 29: 'Ctrl',
    30: 'A', 31: 'S', 32: 'D', 33: 'F', 34: 'G', 35: 'H', 36: 'J', 37: 'K', 38: 'L',
    39: 'Semicolon', 40: 'Quote', 41: 'Backquote', 42: 'Shift', 43: 'Backslash',
    44: 'Z', 45: 'X', 46: 'C', 47: 'V', 48: 'B', 49: 'N', 50: 'M',
    51: 'Comma', 52: 'Period', 53: 'Slash', 54: 'ShiftRight', 55: 'NumpadMultiply',
    56: 'Alt', 57: 'Space', 58: 'CapsLock',

    # Function keys
    59: 'F1', 60: 'F2', 61: 'F3', 62: 'F4', 63: 'F5', 64: 'F6', 65: 'F7', 66: 'F8',
    67: 'F9', 68: 'F10', 87: 'F11', 88: 'F12',
    91: 'F13', 92: 'F14', 93: 'F15', 99: 'F16', 100: 'F17', 101: 'F18', 102: 'F19',
    103: 'F20', 104: 'F21', 105: 'F22', 106: 'F23', 107: 'F24',

    # Lock keys and numpad
    69: 'NumLock', 70: 'ScrollLock',
    71: 'Numpad7', 72: 'Numpad8', 73: 'Numpad9', 74: 'NumpadSubtract',
    75: 'Numpad4', 76: 'Numpad5', 77: 'Numpad6', 78: 'NumpadAdd',
    79: 'Numpad1', 80: 'Numpad2', 81: 'Numpad3', 82: 'Numpad0', 83: 'NumpadDecimal',
    3612: 'NumpadEnter', 3637: 'NumpadDivide',

    # Extended keys
    3613: 'CtrlRight', 3639: 'PrintScreen', 3640: 'AltRight',
    3655: 'Home', 3657: 'PageUp', 3663: 'End', 3665: 'PageDown',
    3666: 'Insert', 3667: 'Delete', 3675: 'Meta', 3676: 'MetaRight',
    57416: 'ArrowUp', 57419: 'ArrowLeft', 57421: 'ArrowRight', 57424: 'ArrowDown',
}

MOUSE_BUTTON_NAMES: dict[int, str] = {
    1: 'Left',
    2: 'Right',
    3: 'Middle',
}

LEFT_BUTTON = 1
RIGHT_BUTTON = 2


def get_key_name(code: int) -> str:
    """Return the display name of a key code.

    Examples:
        >>> get_key_name(30)
        'A'
        >>> get_key_name(9999)
        'Key9999'
    """
    return KEY_NAMES.get(code, f'Key{code}')


def get_button_name(button: int) -> str:
    """Return the display name of a mouse button.

    Examples:
        >>> get_button_name(1)
        'Left'
        >>> get_button_name(5)
        'Button5'
    """
    return MOUSE_BUTTON_NAMES.get(button, f'Button{button}')
