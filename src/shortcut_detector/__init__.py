"""Shortcut Detector - record keyboard/mouse shortcuts from the command line.

This is a standalone application built on shortcut_recorder: it records
shortcuts live from input devices, replays event files, and prints TOML
fragments for the recorded shortcuts.
"""

from common.version import __version__

__all__ = ['__version__']
