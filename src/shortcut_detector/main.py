"""Main entry point for shortcut-detector CLI application."""

import sys
import tomllib
from pathlib import Path

import typer

from common.backends import BackendNotAvailableError
from common.backends import create_backend
from common.backends import list_input_devices
from common.logging_utils import configure_logging
from shortcut_recorder import ConfigLoader
from shortcut_recorder import RecorderConfig
from shortcut_recorder import ShortcutDescriptor
from shortcut_recorder import replay_events

from .formatter import CLEAR_LINE
from .formatter import format_header
from .formatter import format_preview
from .formatter import format_shortcut_recorded
from .formatter import format_verbose_header
from .replay import load_events
from .session import RecordingSession

app = typer.Typer(help='🎹 Shortcut Detector - Record keyboard/mouse shortcuts')


def _load_config(config: Path | None, verbose: bool = False) -> RecorderConfig:
    """Load configuration, exiting with an error message on failure."""
    try:
        app_config, _config_path = ConfigLoader.load(config)
    except FileNotFoundError as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e
    except (ValueError, TypeError, tomllib.TOMLDecodeError) as e:
        typer.echo(f'❌ Failed to load config: {e}', err=True)
        raise typer.Exit(1) from e

    # Apply verbose settings if requested
    if verbose:
        app_config.log_level = 'DEBUG'
        app_config.verbose_logging = True

    configure_logging(app_config.log_level, app_config.log_file)
    return app_config


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    device_name: str | None = typer.Option(
        None,
        '--device-name',
        help='Only read input devices whose name contains this text (case-insensitive). '
             'If not specified, reads every keyboard and mouse.',
    ),
    config: Path | None = typer.Option(None, '--config', help='Path to config file'),
    once: bool = typer.Option(
        False,
        '--once',
        help='Exit after the first recorded shortcut',
    ),
    verbose: bool = typer.Option(
        False,
        '--verbose', '-v',
        help='Enable verbose output with detailed debug traces',
    ),
) -> None:
    """
    Record keyboard/mouse shortcuts and print TOML fragments.

    Accepted shortcuts: Ctrl/Alt + key, two different keys, a key pressed twice
    quickly, a mouse button (left/right only when held), Ctrl/Alt + mouse button.

    Usage examples:

        $ shortcut-detector

        $ shortcut-detector --once --verbose

        $ shortcut-detector --device-name "Logitech"

    Press Ctrl+C to exit the detector.

    Use 'shortcut-detector device-list' to see available input devices.
    """
    # If a subcommand was invoked, don't run recording
    if ctx.invoked_subcommand is not None:
        return

    app_config = _load_config(config, verbose)

    def on_update(descriptor: ShortcutDescriptor) -> None:
        """Called for every preview and every recorded shortcut."""
        if descriptor.is_finished:
            sys.stdout.write(CLEAR_LINE + format_shortcut_recorded(descriptor))
        elif not app_config.verbose_logging:
            sys.stdout.write(format_preview(descriptor))
        sys.stdout.flush()

    if app_config.verbose_logging:
        sys.stdout.write(format_verbose_header(app_config))
    else:
        sys.stdout.write(format_header(app_config))

    try:
        backend = create_backend(device_name=device_name)
    except BackendNotAvailableError as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e

    if device_name:
        print(f'📍 Selected input device (by name): {device_name}', file=sys.stderr)

    session = RecordingSession(backend, on_update=on_update, config=app_config, once=once)

    try:
        session.start()
    except BackendNotAvailableError as e:
        typer.echo(f'\n❌ {e}', err=True)
        raise typer.Exit(1) from e
    except KeyboardInterrupt:
        session.stop()
        sys.stdout.write('\n\n👋 Exiting shortcut detector. Goodbye!\n')
        sys.exit(0)


@app.command()
def replay(
    events_file: Path = typer.Argument(..., help='TOML file with [[events]] entries'),
    config: Path | None = typer.Option(None, '--config', help='Path to config file'),
    show_updates: bool = typer.Option(
        False,
        '--show-updates',
        help='Also print the live preview after every event',
    ),
    verbose: bool = typer.Option(
        False,
        '--verbose', '-v',
        help='Enable verbose output with detailed debug traces',
    ),
) -> None:
    """Replay recorded input events and print the shortcuts they produce.

    Example:
        $ shortcut-detector replay events.toml --show-updates
    """
    app_config = _load_config(config, verbose)

    try:
        events = load_events(events_file)
    except FileNotFoundError as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e
    except (ValueError, tomllib.TOMLDecodeError) as e:
        typer.echo(f'❌ Invalid event file: {e}', err=True)
        raise typer.Exit(1) from e

    descriptors = replay_events(events, config=app_config, verbose=app_config.verbose_logging)

    recorded = 0
    for idx, descriptor in enumerate(descriptors, 1):
        if descriptor.is_finished:
            recorded += 1
            typer.echo(format_shortcut_recorded(descriptor))
        elif show_updates:
            typer.echo(f'  [{idx}] {descriptor.label or "…"}')

    typer.echo(f'{recorded} shortcut(s) recorded from {len(events)} event(s)')


def _list_input_devices() -> None:
    """List all available keyboards and mice."""
    try:
        devices = list_input_devices()
    except PermissionError as e:
        typer.echo(f'❌ {e}', err=True)
        raise typer.Exit(1) from e
    except (ImportError, OSError) as e:
        typer.echo(f'❌ Error listing devices: {e}', err=True)
        raise typer.Exit(1) from e

    if not devices:
        typer.echo('❌ No keyboard or mouse devices found')
        raise typer.Exit(1)

    physical = [d for d in devices if not d['is_virtual']]
    virtual = [d for d in devices if d['is_virtual']]

    typer.echo('📱 Available input devices:\n')

    if physical:
        typer.echo('Physical devices:')
        for i, device in enumerate(physical, 1):
            typer.echo(f'  {i}. {device["name"]} ({device["kind"]})')
            typer.echo(f'     Path: {device["path"]}')
        typer.echo()

    if virtual:
        typer.echo('Virtual devices (uinput):')
        for i, device in enumerate(virtual, 1):
            typer.echo(f'  {i}. {device["name"]} ({device["kind"]}) [VIRTUAL]')
            typer.echo(f'     Path: {device["path"]}')
        typer.echo()

    if physical and physical[0]['name'].split():
        example_name = physical[0]['name'].split()[0]
        typer.echo(f'💡 To use a specific device:\n   shortcut-detector --device-name "{example_name}"')


@app.command(name='device-list')
def device_list() -> None:
    """List all available keyboards and mice.

    Use the device name with --device-name option to select a specific device.

    Example:
        $ shortcut-detector device-list
    """
    _list_input_devices()


@app.command(name='check-config')
def check_config(
    config: Path | None = typer.Option(None, '--config', help='Path to config file'),
) -> None:
    """Validate configuration file and display the effective settings.

    Examples:
        shortcut-detector check-config
        shortcut-detector check-config --config /path/to/config.toml
    """
    try:
        app_config, config_path = ConfigLoader.load(config)
    except FileNotFoundError as e:
        typer.echo(f'❌ Config file not found: {e}', err=True)
        raise typer.Exit(1) from e
    except Exception as e:
        typer.echo(f'❌ Configuration error: {e}', err=True)
        raise typer.Exit(1) from e

    typer.echo('✓ Configuration is valid\n')

    if config_path:
        typer.echo(f'Config file: {config_path}')
    else:
        typer.echo('Config file: none found, using built-in defaults')
    typer.echo(f'Long press threshold: {app_config.long_press_threshold_ms}ms')
    typer.echo(f'Double press threshold: {app_config.double_press_threshold_ms}ms')
    typer.echo(f'Log level: {app_config.log_level}')
    if app_config.log_file:
        typer.echo(f'Log file: {app_config.log_file}')
    typer.echo(f'Verbose logging: {app_config.verbose_logging}')

    labels = app_config.labels
    typer.echo('\nLabels:')
    typer.echo(f'   Separator: {labels.separator!r}')
    typer.echo(f'   Double press prefix: {labels.double_press_prefix!r}')
    typer.echo(f'   Long press suffix: {labels.long_press_suffix!r}')
    typer.echo(f'   Short press suffix: {labels.short_press_suffix!r}')


if __name__ == '__main__':
    app()
