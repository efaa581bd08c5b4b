"""Live recording session for shortcut-detector.

This module connects an input backend to a ShortcutRecorder.
"""

from collections.abc import Callable

from common.backends import InputBackend
from common.logging_utils import get_logger
from shortcut_recorder import RecorderConfig
from shortcut_recorder import ShortcutDescriptor
from shortcut_recorder import ShortcutRecorder


class RecordingSession:
    """Feed backend events into a recorder and report descriptors.

    This class integrates:
    - an InputBackend (produces raw events)
    - a ShortcutRecorder (recognizes shortcuts)
    """

    def __init__(
        self,
        backend: InputBackend,
        on_update: Callable[[ShortcutDescriptor], None],
        config: RecorderConfig | None = None,
        once: bool = False,
    ) -> None:
        """Initialize the session.

        Args:
            backend: Source of raw input events
            on_update: Receives every descriptor the recorder emits
            config: Recorder configuration
            once: Stop the backend after the first recorded shortcut
        """
        self.backend = backend
        self.on_update = on_update
        self.config = config or RecorderConfig()
        self.once = once
        self.recorded: list[ShortcutDescriptor] = []
        self.logger = get_logger('shortcut_detector.session')
        self.recorder = ShortcutRecorder(
            on_update=self._on_update,
            config=self.config,
            verbose=self.config.verbose_logging,
        )

    def start(self) -> None:
        """Start recording (blocking call).

        Returns when the backend stops: after stop(), after the first shortcut
        in once mode, or when the backend gives up.
        """
        self.logger.info(f'Recording shortcuts with {self.backend.get_backend_name()}')
        self.backend.start(on_event=self.recorder.handle_event)

    def stop(self) -> None:
        """Stop recording and drop any unfinished attempt."""
        self.backend.stop()
        self.recorder.reset()

    def _on_update(self, descriptor: ShortcutDescriptor) -> None:
        if descriptor.is_finished:
            self.recorded.append(descriptor)

        self.on_update(descriptor)

        if descriptor.is_finished and self.once:
            self.logger.debug('Shortcut recorded in once mode, stopping backend')
            self.backend.stop()
