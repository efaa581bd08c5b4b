"""Output formatting utilities for shortcut detector.

This module provides functions to format recorded shortcuts for console output,
including TOML fragments.
"""

import json
from typing import Any

from shortcut_recorder import RecorderConfig
from shortcut_recorder import ShortcutDescriptor

from . import __version__

# Carriage return + erase to end of line, for redrawing the preview in place
CLEAR_LINE = '\r\033[K'


def format_header(config: RecorderConfig) -> str:
    """Format the application header.

    Args:
        config: Recorder configuration (thresholds are shown)

    Returns:
        str: Formatted header string
    """
    return f"""🎹 Shortcut Detector v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Long press: ≥{config.long_press_threshold_ms}ms, double press: ≤{config.double_press_threshold_ms}ms
Press Ctrl+C to exit

Press the shortcut you want to record...
"""


def format_verbose_header(config: RecorderConfig) -> str:
    """Format the verbose mode header.

    Args:
        config: Recorder configuration (thresholds are shown)

    Returns:
        str: Formatted header string
    """
    return f"""🎹 Shortcut Detector v{__version__} (verbose mode)
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Long press: ≥{config.long_press_threshold_ms}ms, double press: ≤{config.double_press_threshold_ms}ms

[DEBUG] Waiting for input events...
"""


def format_preview(descriptor: ShortcutDescriptor) -> str:
    """Format a live preview line, redrawn in place.

    Returns:
        str: Carriage-return prefixed line, cleared to end of line
    """
    label = descriptor.label or '…'
    return f'{CLEAR_LINE}  ⌨️  {label}'


def _toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    # TOML basic strings share JSON's escaping rules
    return json.dumps(str(value), ensure_ascii=False)


def _toml_inline_table(data: dict[str, Any]) -> str:
    items = ', '.join(f'{key} = {_toml_value(value)}' for key, value in data.items())
    return f'{{ {items} }}'


def format_shortcut_toml(descriptor: ShortcutDescriptor) -> str:
    """Format a finished shortcut as a TOML fragment.

    Examples:
        [[shortcuts]]
        label = "Ctrl → A"
        kind = "modifier_key"
        sequence = [
          { type = "key", code = 29, ctrl = true, alt = false, double_press = false },
          ...
        ]
    """
    data = descriptor.to_dict()
    lines = [
        '[[shortcuts]]',
        f'label = {_toml_value(data["label"])}',
        f'kind = {_toml_value(data["kind"])}',
        'sequence = [',
    ]
    lines.extend(f'  {_toml_inline_table(element)},' for element in data['sequence'])
    lines.append(']')
    return '\n'.join(lines)


def format_shortcut_recorded(descriptor: ShortcutDescriptor) -> str:
    """Format a recorded shortcut message.

    Args:
        descriptor: FINISHED descriptor

    Returns:
        str: Formatted message with TOML fragment
    """
    fragment = '\n'.join(f'  {line}' for line in format_shortcut_toml(descriptor).splitlines())
    return f"""
✓ Shortcut recorded: {descriptor.label}

  📋 TOML fragment:
  ────────────────────────────────────────────
{fragment}
  ────────────────────────────────────────────

"""
