"""Base application: owns the window and runs the main loop."""

from __future__ import annotations

from typing import Optional

from hazelette.events import Event, EventDispatcher, WindowCloseEvent
from hazelette.log import TRACE, core_logger
from hazelette.window import Window, create_window

CLEAR_COLOR = (1.0, 0.0, 1.0, 1.0)


class Application:
    """Runs frames until its window is closed. Subclass it to build a program."""

    def __init__(self, window: Optional[Window] = None) -> None:
        self.window = window if window is not None else create_window()
        self.window.set_event_callback(self.on_event)
        self.running = True

    def on_event(self, event: Event) -> None:
        """Handle one event coming from the window."""
        EventDispatcher(event).dispatch(WindowCloseEvent, self._on_window_closed)
        core_logger().log(TRACE, "%s", event)

    def _on_window_closed(self, event: WindowCloseEvent) -> bool:
        self.running = False
        return True

    def run(self) -> None:
        """Clear and update the window each frame until it is closed."""
        while self.running:
            self.window.clear(CLEAR_COLOR)
            self.window.on_update()