import pytest

from hazelette.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    Event,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)


def test_window_resize_string_and_fields():
    event = WindowResizeEvent(1280, 720)
    assert str(event) == "WindowResizeEvent: 1280, 720"
    assert (event.width, event.height) == (1280, 720)


@pytest.mark.parametrize(
    "event, name",
    [
        (WindowCloseEvent(), "WindowClose"),
        (AppTickEvent(), "AppTick"),
        (AppUpdateEvent(), "AppUpdate"),
        (AppRenderEvent(), "AppRender"),
    ],
)
def test_default_string_is_name(event, name):
    assert event.name == name
    assert str(event) == name


def test_key_events_string():
    assert str(KeyPressedEvent(65, 1)) == "KeyPressedEvent: 65 (1 repeats)"
    assert str(KeyReleasedEvent(65)) == "KeyReleasedEvent: 65"
    assert KeyPressedEvent(65, 0).name == "KeyPressed"


def test_mouse_button_events_string():
    assert str(MouseButtonPressedEvent(2)) == "MouseButtonPressedEvent: 2"
    assert str(MouseButtonReleasedEvent(0)) == "MouseButtonReleasedEvent: 0"
    assert MouseButtonReleasedEvent(0).name == "MouseButtonReleased"


def test_mouse_moved_and_scrolled_string():
    assert str(MouseMovedEvent(1.5, 2.0)) == "MouseMovedEvent: 1.5, 2"
    assert str(MouseScrolledEvent(0, -1)) == "MouseScrolledEvent: 0, -1"
    moved = MouseMovedEvent(3, 4)
    assert (moved.x, moved.y) == (3.0, 4.0)


@pytest.mark.parametrize("cls", [Event, KeyEvent, MouseButtonEvent])
def test_abstract_events_cannot_be_built(cls):
    with pytest.raises(TypeError):
        if cls is Event:
            cls()
        else:
            cls(1)


def test_categories():
    key = KeyPressedEvent(1, 0)
    assert key.is_in_category(EventCategory.KEYBOARD)
    assert key.is_in_category(EventCategory.INPUT)
    assert not key.is_in_category(EventCategory.MOUSE)
    close = WindowCloseEvent()
    assert close.is_in_category(EventCategory.APPLICATION)
    assert not close.is_in_category(EventCategory.INPUT)
    assert not close.is_in_category(EventCategory.NONE)
    button = MouseButtonPressedEvent(0)
    assert button.is_in_category(EventCategory.MOUSE)
    assert not button.is_in_category(EventCategory.MOUSE_BUTTON)


def test_event_types_match_classes():
    assert WindowCloseEvent().event_type is EventType.WINDOW_CLOSE
    assert MouseScrolledEvent(0, 0).event_type is EventType.MOUSE_SCROLLED
    assert EventType.MOUSE_BUTTON_PRESSED.label == "MouseButtonPressed"


def test_new_events_are_unhandled():
    assert WindowCloseEvent().handled is False


def test_dispatch_matching_type_sets_handled():
    event = WindowCloseEvent()
    seen = []

    def handler(e):
        seen.append(e)
        return True

    assert EventDispatcher(event).dispatch(WindowCloseEvent, handler) is True
    assert seen == [event]
    assert event.handled is True


def test_dispatch_handler_returning_false():
    event = KeyReleasedEvent(10)
    assert EventDispatcher(event).dispatch(KeyReleasedEvent, lambda e: False) is True
    assert event.handled is False


def test_dispatch_other_type_skips_handler():
    event = WindowResizeEvent(10, 20)
    seen = []
    result = EventDispatcher(event).dispatch(WindowCloseEvent, lambda e: seen.append(e) or True)
    assert result is False
    assert seen == []
    assert event.handled is False


def test_dispatch_is_by_exact_type_not_base_class():
    event = KeyPressedEvent(5, 0)
    assert EventDispatcher(event).dispatch(KeyEvent, lambda e: True) is False
    assert event.handled is False