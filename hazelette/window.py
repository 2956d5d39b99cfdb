"""Desktop window that turns native input into engine events."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from hazelette.events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from hazelette.log import core_logger

EventCallback = Callable[[Event], None]

# Frame cap applied while vertical sync is on.
_VSYNC_FPS = 60

# Native button numbers (1 left, 2 middle, 3 right) to engine button indices.
_BUTTONS = {1: 0, 3: 1, 2: 2}
# Native buttons 4 and 5 duplicate wheel motion, which arrives as MOUSEWHEEL.
_WHEEL_BUTTONS = frozenset({4, 5})


@dataclass
class WindowProps:
    """Title and size a window is created with."""

    title: str = "Hazel Engine"
    width: int = 1280
    height: int = 720


class Window(abc.ABC):
    """A desktop window that reports its input through one callback."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Current width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Current height in pixels."""

    @property
    @abc.abstractmethod
    def vsync(self) -> bool:
        """Whether frames are synchronised to the display."""

    @abc.abstractmethod
    def on_update(self) -> None:
        """Process pending input and present the frame."""

    @abc.abstractmethod
    def set_event_callback(self, callback: EventCallback) -> None:
        """Set the function that receives every event of this window."""

    @abc.abstractmethod
    def clear(self, color: tuple[float, float, float, float]) -> None:
        """Fill the frame with an RGBA colour whose channels run from 0 to 1."""

    @abc.abstractmethod
    def close(self) -> None:
        """Destroy the window."""

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _channel(value: float) -> int:
    return round(min(max(float(value), 0.0), 1.0) * 255)


class PygameWindow(Window):
    """Window backed by the pygame display."""

    def __init__(self, props: WindowProps) -> None:
        self.title = props.title
        self._width = props.width
        self._height = props.height
        self._callback: Optional[EventCallback] = None
        self._keys_down: set[int] = set()
        self._clock = pygame.time.Clock()

        core_logger().info("Creating window %s (%s, %s)", props.title, props.width, props.height)

        if not pygame.display.get_init():
            pygame.display.init()

        self.surface: Optional[pygame.Surface] = pygame.display.set_mode(
            (props.width, props.height), pygame.RESIZABLE
        )
        pygame.display.set_caption(props.title)
        self._vsync = True

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def vsync(self) -> bool:
        return self._vsync

    @vsync.setter
    def vsync(self, enabled: bool) -> None:
        self._vsync = bool(enabled)

    def set_event_callback(self, callback: EventCallback) -> None:
        self._callback = callback

    def _emit(self, event: Event) -> Event:
        if self._callback is None:
            raise RuntimeError("no event callback set on the window")
        self._callback(event)
        return event

    def _translate(self, native: pygame.event.Event) -> Optional[Event]:
        kind = native.type
        if kind == pygame.QUIT:
            return WindowCloseEvent()
        if kind == pygame.VIDEORESIZE:
            self._width, self._height = native.w, native.h
            return WindowResizeEvent(native.w, native.h)
        if kind == pygame.KEYDOWN:
            repeat = 1 if native.key in self._keys_down else 0
            self._keys_down.add(native.key)
            return KeyPressedEvent(native.key, repeat)
        if kind == pygame.KEYUP:
            self._keys_down.discard(native.key)
            return KeyReleasedEvent(native.key)
        if kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if native.button in _WHEEL_BUTTONS:
                return None
            button = _BUTTONS.get(native.button, native.button - 3)
            if kind == pygame.MOUSEBUTTONDOWN:
                return MouseButtonPressedEvent(button)
            return MouseButtonReleasedEvent(button)
        if kind == pygame.MOUSEWHEEL:
            return MouseScrolledEvent(native.x, native.y)
        if kind == pygame.MOUSEMOTION:
            x, y = native.pos
            return MouseMovedEvent(x, y)
        return None

    def handle(self, event: pygame.event.Event) -> Optional[Event]:
        """Turn one native event into an engine event and pass it to the callback.

        Returns the engine event, or None when the native event has no counterpart.
        """
        translated = self._translate(event)
        if translated is None:
            return None
        return self._emit(translated)

    def on_update(self) -> None:
        for native in pygame.event.get():
            self.handle(native)
        pygame.display.flip()
        if self._vsync:
            self._clock.tick(_VSYNC_FPS)

    def clear(self, color: tuple[float, float, float, float]) -> None:
        if self.surface is None:
            raise RuntimeError("window is closed")
        self.surface.fill(tuple(_channel(c) for c in color))

    def close(self) -> None:
        if self.surface is not None:
            self.surface = None
            pygame.display.quit()


def create_window(props: Optional[WindowProps] = None) -> Window:
    """Create the platform window for ``props`` (defaults when omitted)."""
    return PygameWindow(props if props is not None else WindowProps())