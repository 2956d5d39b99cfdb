# hazelette

hazelette is the core of a small event-driven game engine. It gives you:

- typed events for the window, the keyboard and the mouse (`hazelette.events`).
  Each has an `event_type`, a `category_flags` bit mask of `EventCategory`
  values, a `name` and a readable text form through `str()`;
- an `EventDispatcher` that passes an event to a handler only when the event
  is of the type the handler asks for, and stores the handler's result in
  `event.handled`;
- two named loggers, `ENGINE` for the engine and `APP` for the application
  (`hazelette.log`), writing lines of the form `[HH:MM:SS] NAME: message`,
  coloured by level when the stream is a terminal;
- a pygame window (`hazelette.window`) that turns pygame input into engine
  events and hands them to one callback;
- an `Application` base class (`hazelette.application`) that owns a window,
  logs every event it gets at trace level and stops its main loop when the
  window is closed.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Trying it out

The bundled sandbox application opens a magenta 1280×720 window titled
"Hazel Engine" and logs every event it receives to standard output until you
close it:

```
hazelette-sandbox
```

## Using the events

```python
from hazelette.events import (
    EventCategory,
    EventDispatcher,
    KeyPressedEvent,
    WindowCloseEvent,
)

event = KeyPressedEvent(65, 1)
print(event)                                         # KeyPressedEvent: 65 (1 repeats)
print(event.is_in_category(EventCategory.KEYBOARD))  # True

dispatcher = EventDispatcher(event)
dispatcher.dispatch(WindowCloseEvent, lambda e: True)   # False: wrong type
dispatcher.dispatch(KeyPressedEvent, lambda e: True)    # True
print(event.handled)                                 # True
```

The base classes `Event`, `KeyEvent` and `MouseButtonEvent` have no event
type of their own and raise `TypeError` when built directly.

## Logging

Call `log.init()` before anything else; it sets up both loggers at trace
level, writing to standard output or to the stream you pass. `core_logger()`
and `client_logger()` return them, and raise `RuntimeError` if `init()` has
not been called. Creating a window logs through the engine logger, so
`init()` must come first.

## Writing an application

Subclass `Application` and start it with `run()`. Each frame the main loop
clears the window to magenta, then calls `window.on_update()`, which pumps
pygame's input and sends each input as an event to `on_event`, until a
`WindowCloseEvent` arrives. An `Application` can also be given a ready-made
`Window`; otherwise it creates one with `create_window()`.

```python
import io

from hazelette import log
from hazelette.application import Application

log.init(io.StringIO())


class MyGame(Application):
    pass


game = MyGame()
try:
    game.run()
finally:
    game.window.close()
```

`hazelette.sandbox` holds `Sandbox`, the smallest such application, together
with `create_application()` and `main()`, which the `hazelette-sandbox`
command calls.

## The window

`create_window(props)` builds a `PygameWindow` from a `WindowProps` (title,
width, height). Its `width`, `height` and `vsync` properties report its state;
with `vsync` on, frames are capped at 60 per second. `handle(event)` turns a
single pygame event into an engine event, passes it to the callback set with
`set_event_callback()` and returns it, or returns `None` for pygame events
that have no engine counterpart. Windows are context managers and close on
exit.

## What it does not do

The engine draws nothing beyond clearing the window to one colour: there is
no renderer, no layers, no scene and no game loop timing beyond the frame cap.
Window focus and move events exist as event types but the window never sends
them.