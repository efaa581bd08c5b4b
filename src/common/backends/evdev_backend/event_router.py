from __future__ import annotations

import queue
import traceback
from typing import Any, Callable

from .types import ParsedEvent


class EventRouter:
    """Drains the reader queue on the calling thread and routes key events."""

    def __init__(
        self,
        logger: Any,
        parse_event: Callable[[Any, Any], ParsedEvent | None],
        handle_event: Callable[[ParsedEvent], None],
    ) -> None:
        self.logger = logger
        self._parse_event = parse_event
        self._handle_event = handle_event

    def run(self, queue_get, stop_event) -> None:
        event_count = 0
        self.logger.info('Starting main event processing loop...')
        while not stop_event.is_set():
            try:
                device, event = queue_get(timeout=0.1)
            except queue.Empty:
                continue
            try:
                event_count += 1
                if event_count == 1:
                    self.logger.info('First event received - event loop is working')
                parsed = self._parse_event(device, event)
                if not parsed:
                    continue
                if event_count <= 5:
                    self.logger.debug(
                        f'Key event #{event_count}: code={parsed.code}, value={parsed.value}, button={parsed.is_button}'
                    )
                self._handle_event(parsed)
            except Exception as e:  # noqa: BLE001
                self.logger.error(f'Error processing event: {e}')
                self.logger.debug(traceback.format_exc())
                continue
