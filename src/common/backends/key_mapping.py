"""Mapping between evdev codes and the recorder's key/button codes.

Linux evdev key codes 1-88 are the PC set 1 scan codes, which is also what
the recorder's key table (libuiohook virtual key codes) uses. Keys beyond
that range are translated through EVDEV_TO_HOOK_KEY; mouse buttons
(BTN_* codes) are translated to the 1-based button ids.
"""

# evdev event type for key and button events (ecodes.EV_KEY)
EV_KEY = 0x01

# Plain scan-code range shared by evdev and the key table
_SHARED_RANGE_END = 88

EVDEV_TO_HOOK_KEY: dict[int, int] = {
    # Function keys F13-F24 (KEY_F13 .. KEY_F24)
    183: 91, 184: 92, 185: 93, 186: 99, 187: 100, 188: 101,
    189: 102, 190: 103, 191: 104, 192: 105, 193: 106, 194: 107,

    # Right-hand modifiers and numpad extras
    96: 3612,     # KEY_KPENTER
    97: 3613,     # KEY_RIGHTCTRL
    98: 3637,     # KEY_KPSLASH
    99: 3639,     # KEY_SYSRQ
    100: 3640,    # KEY_RIGHTALT
    125: 3675,    # KEY_LEFTMETA
    126: 3676,    # KEY_RIGHTMETA

    # Navigation
    102: 3655,    # KEY_HOME
    103: 57416,   # KEY_UP
    104: 3657,    # KEY_PAGEUP
    105: 57419,   # KEY_LEFT
    106: 57421,   # KEY_RIGHT
    107: 3663,    # KEY_END
    108: 57424,   # KEY_DOWN
    109: 3665,    # KEY_PAGEDOWN
    110: 3666,    # KEY_INSERT
    111: 3667,    # KEY_DELETE
}

EVDEV_TO_MOUSE_BUTTON: dict[int, int] = {
    0x110: 1,  # BTN_LEFT
    0x111: 2,  # BTN_RIGHT
    0x112: 3,  # BTN_MIDDLE
    0x113: 4,  # BTN_SIDE
    0x114: 5,  # BTN_EXTRA
    0x115: 5,  # BTN_FORWARD
    0x116: 4,  # BTN_BACK
}

# KEY_LEFTCTRL, KEY_RIGHTCTRL
CTRL_CODES = frozenset({29, 97})
# KEY_LEFTALT, KEY_RIGHTALT
ALT_CODES = frozenset({56, 100})

# Unmapped evdev codes above the shared range are shifted past every hook
# key code so they never alias another key (e.g. KEY_HIRAGANA 91 vs F13 91)
UNMAPPED_KEY_OFFSET = 0x10000

# BTN_MISC .. BTN_GEAR_UP: everything in this block is a button, not a key
_BUTTON_RANGE = range(0x100, 0x152)


def is_button_code(code: int) -> bool:
    """Return True if an EV_KEY code belongs to the BTN_* block."""
    return code in _BUTTON_RANGE


def evdev_to_hook_keycode(code: int) -> int:
    """Convert an evdev key code to the recorder's key code.

    Codes without a table entry are moved into a private range starting at
    UNMAPPED_KEY_OFFSET; the label formatter falls back to "Key<code>" for them.

    Examples:
        >>> evdev_to_hook_keycode(30)   # KEY_A
        30
        >>> evdev_to_hook_keycode(111)  # KEY_DELETE
        3667
        >>> evdev_to_hook_keycode(91)   # KEY_HIRAGANA, unmapped
        65627
    """
    if code <= _SHARED_RANGE_END:
        return code
    if code in EVDEV_TO_HOOK_KEY:
        return EVDEV_TO_HOOK_KEY[code]
    return code + UNMAPPED_KEY_OFFSET


def evdev_to_mouse_button(code: int) -> int | None:
    """Convert an evdev BTN_* code to a mouse button id, or None if it is not a mouse button."""
    return EVDEV_TO_MOUSE_BUTTON.get(code)
